"""Catalogue filtering.

Filters are independently optional. A product must satisfy every supplied
dimension (AND); within a multi-valued dimension any listed value matches
(OR). Sorting and paging are left to the client.
"""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from storefront.product.product import Marketplace, Product, ProductCondition

_CONDITIONS = {c.value for c in ProductCondition}
_MARKETPLACES = {m.value for m in Marketplace}


@dataclass(frozen=True)
class ProductFilters:
    category_id: str | None = None
    condition: tuple[str, ...] = field(default_factory=tuple)
    marketplace: tuple[str, ...] = field(default_factory=tuple)
    min_price: float | None = None
    max_price: float | None = None
    brand: tuple[str, ...] = field(default_factory=tuple)
    search: str | None = None

    @classmethod
    def from_query(
        cls,
        category_id=None,
        condition=None,
        marketplace=None,
        min_price=None,
        max_price=None,
        brand=None,
        search=None,
    ):
        """Build filters from raw query values, dropping unknown enum values."""
        return cls(
            category_id=category_id or None,
            condition=tuple(c for c in (condition or []) if c in _CONDITIONS),
            marketplace=tuple(m for m in (marketplace or []) if m in _MARKETPLACES),
            min_price=min_price,
            max_price=max_price,
            brand=tuple(b for b in (brand or []) if b),
            search=search or None,
        )

    def matches(self, product) -> bool:
        if self.category_id is not None and str(product.category_id) != str(self.category_id):
            return False

        if self.condition and product.condition not in self.condition:
            return False

        if self.marketplace and (not product.marketplace or product.marketplace not in self.marketplace):
            return False

        if self.min_price is not None and product.price < self.min_price:
            return False

        if self.max_price is not None and product.price > self.max_price:
            return False

        if self.brand and product.brand not in self.brand:
            return False

        if self.search:
            needle = self.search.lower()
            haystacks = (product.name, product.description, product.brand)
            if not any(needle in (text or "").lower() for text in haystacks):
                return False

        return True


def list_products(filters: ProductFilters | None = None) -> list[Product]:
    """Return the catalogue products that satisfy ``filters``."""
    repo = current_domain.repository_for(Product)
    products = repo.list_in_category(filters.category_id) if filters and filters.category_id else repo.list_all()
    if filters is None:
        return products
    return [product for product in products if filters.matches(product)]
