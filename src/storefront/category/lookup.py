"""Category reads."""

from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.errors import NotFoundError


def list_categories() -> list[Category]:
    return current_domain.repository_for(Category).list_all()


def get_category(id_or_slug: str) -> Category:
    """Resolve a category by id, falling back to its slug."""
    category = current_domain.repository_for(Category).find_by_id_or_slug(id_or_slug)
    if category is None:
        raise NotFoundError("Category not found")
    return category
