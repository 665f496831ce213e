"""Repository for the InventoryRecord aggregate."""

from storefront.domain import storefront
from storefront.inventory.inventory import InventoryRecord


@storefront.repository(part_of=InventoryRecord)
class InventoryRecordRepository:
    def for_product(self, product_id) -> InventoryRecord | None:
        """Return the inventory record of a product, or None."""
        results = self._dao.query.filter(product_id=str(product_id)).all().items
        return results[0] if results else None
