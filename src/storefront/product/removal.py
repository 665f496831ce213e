"""Product removal: command and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.inventory.inventory import InventoryRecord
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Product")
class RemoveProduct:
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class RemoveProductHandler:
    @handle(RemoveProduct)
    def remove_product(self, command):
        product_repo = current_domain.repository_for(Product)
        product = product_repo.get(command.product_id)

        inventory_repo = current_domain.repository_for(InventoryRecord)
        record = inventory_repo.for_product(product.id)
        if record is not None:
            inventory_repo._dao.delete(record)

        product_repo._dao.delete(product)
        logger.info("product_removed", product_id=str(product.id), name=product.name)
