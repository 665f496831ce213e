"""Domain events for the InventoryRecord aggregate."""

from protean.fields import Identifier, Integer

from storefront.domain import storefront


@storefront.event(part_of="InventoryRecord")
class StockLevelSet:
    """An administrator overwrote the stock level of a product."""

    __version__ = 1

    product_id = Identifier(required=True)
    previous_quantity = Integer(required=True)
    new_quantity = Integer(required=True)


@storefront.event(part_of="InventoryRecord")
class StockConsumed:
    """Stock was taken out by a placed order."""

    __version__ = 1

    product_id = Identifier(required=True)
    order_id = Identifier()
    quantity = Integer(required=True)
    remaining = Integer(required=True)
