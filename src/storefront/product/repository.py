"""Repository for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.domain import storefront
from storefront.product.product import Product


@storefront.repository(part_of=Product)
class ProductRepository:
    def find(self, product_id) -> Product | None:
        """Return the product with the given identity, or None."""
        try:
            return self.get(str(product_id))
        except ObjectNotFoundError:
            return None

    def list_all(self) -> list[Product]:
        return self._dao.query.all().items

    def list_in_category(self, category_id) -> list[Product]:
        return self._dao.query.filter(category_id=str(category_id)).all().items
