"""Catalogue bootstrap data."""

from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.category.management import CreateCategory
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

INITIAL_CATEGORIES = [
    {"name": "Laptops", "slug": "laptops", "icon": "fas fa-laptop"},
    {"name": "Smartphones", "slug": "smartphones", "icon": "fas fa-mobile-alt"},
    {"name": "Tablets", "slug": "tablets", "icon": "fas fa-tablet-alt"},
    {"name": "Headphones", "slug": "headphones", "icon": "fas fa-headphones"},
    {"name": "TVs", "slug": "tvs", "icon": "fas fa-tv"},
    {"name": "Gaming", "slug": "gaming", "icon": "fas fa-gamepad"},
]


def seed_categories() -> int:
    """Create the starter categories when the catalogue has none. Returns how many were created."""
    if current_domain.repository_for(Category).list_all():
        return 0

    for category in INITIAL_CATEGORIES:
        current_domain.process(CreateCategory(**category), asynchronous=False)

    logger.info("categories_seeded", count=len(INITIAL_CATEGORIES))
    return len(INITIAL_CATEGORIES)
