"""Repository for the Category aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.category.category import Category
from storefront.domain import storefront


@storefront.repository(part_of=Category)
class CategoryRepository:
    def find_by_slug(self, slug: str) -> Category | None:
        """Find a Category by its slug."""
        results = self._dao.query.filter(slug=slug).all().items
        return results[0] if results else None

    def find_by_id_or_slug(self, identifier: str) -> Category | None:
        """Look the category up by identity first, then by slug."""
        try:
            return self.get(identifier)
        except ObjectNotFoundError:
            return self.find_by_slug(identifier)

    def list_all(self) -> list[Category]:
        return self._dao.query.all().items
