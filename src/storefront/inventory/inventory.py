"""InventoryRecord aggregate: the source of truth for a product's stock.

Exactly one record exists per product. Product.stock mirrors ``quantity``;
every change made here is copied onto the product within the same Unit of
Work.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer

from storefront.domain import storefront
from storefront.inventory.events import StockConsumed, StockLevelSet


@storefront.aggregate(limit=None)
class InventoryRecord:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, default=0, min_value=0)
    last_updated = DateTime()

    @classmethod
    def create(cls, product_id, quantity=0):
        return cls(
            product_id=product_id,
            quantity=quantity,
            last_updated=datetime.now(UTC),
        )

    def can_fulfil(self, requested):
        return self.quantity >= requested

    def set_quantity(self, quantity):
        """Overwrite the stock level (admin path)."""
        if quantity is None or quantity < 0:
            raise ValidationError({"quantity": ["Quantity must be a non-negative integer"]})

        previous = self.quantity
        self.quantity = quantity
        self.last_updated = datetime.now(UTC)

        self.raise_(
            StockLevelSet(
                product_id=str(self.product_id),
                previous_quantity=previous,
                new_quantity=quantity,
            )
        )

    def consume(self, quantity, order_id=None):
        """Take ``quantity`` units out of stock, flooring the level at zero."""
        if quantity < 1:
            raise ValidationError({"quantity": ["Consumed quantity must be at least 1"]})

        self.quantity = max(self.quantity - quantity, 0)
        self.last_updated = datetime.now(UTC)

        self.raise_(
            StockConsumed(
                product_id=str(self.product_id),
                order_id=str(order_id) if order_id else None,
                quantity=quantity,
                remaining=self.quantity,
            )
        )
        return self.quantity
