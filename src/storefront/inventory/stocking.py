"""Admin stock edits: command, handler and the shared stock-writing helper."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.inventory.inventory import InventoryRecord
from storefront.inventory.locks import stock_locks
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="InventoryRecord")
class SetStock:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=0)


def write_stock_level(product, quantity):
    """Overwrite the inventory record and the product mirror together.

    Creates the inventory record when the product has none yet. Must run
    inside the caller's Unit of Work.
    """
    inventory_repo = current_domain.repository_for(InventoryRecord)
    record = inventory_repo.for_product(product.id)
    if record is None:
        record = InventoryRecord.create(product_id=product.id, quantity=quantity)
    else:
        record.set_quantity(quantity)

    product.sync_stock(record.quantity)

    inventory_repo.add(record)
    current_domain.repository_for(Product).add(product)
    return record


@storefront.command_handler(part_of=InventoryRecord)
class StockHandler:
    @handle(SetStock)
    def set_stock(self, command):
        product = current_domain.repository_for(Product).get(command.product_id)
        record = write_stock_level(product, command.quantity)
        logger.info("stock_set", product_id=str(product.id), quantity=record.quantity)
        return str(record.id)


def set_stock(product_id, quantity):
    """Overwrite a product's stock level while holding its stock lock."""
    with stock_locks.hold([product_id]):
        return current_domain.process(
            SetStock(product_id=product_id, quantity=quantity),
            asynchronous=False,
        )
