"""Product details management: command, handler and locked entry point."""

import json

from protean import handle
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.inventory.locks import stock_locks
from storefront.inventory.stocking import write_stock_level
from storefront.product.creation import ensure_category_exists
from storefront.product.product import Product


@storefront.command(part_of="Product")
class UpdateProduct:
    product_id = Identifier(required=True)
    changes = Text()  # JSON: only the attributes being changed
    stock = Integer(min_value=0)


@storefront.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        changes = json.loads(command.changes) if command.changes else {}
        if changes.get("category_id") is not None:
            ensure_category_exists(changes["category_id"])

        if changes:
            product.update_details(**changes)

        if command.stock is not None:
            # Writes the product as well as its inventory record
            write_stock_level(product, command.stock)
        else:
            repo.add(product)


def update_product(product_id, changes, stock=None):
    """Apply a partial product update; a stock change takes the stock lock."""
    command = UpdateProduct(
        product_id=product_id,
        changes=json.dumps(changes) if changes else None,
        stock=stock,
    )
    if stock is None:
        return current_domain.process(command, asynchronous=False)

    with stock_locks.hold([product_id]):
        return current_domain.process(command, asynchronous=False)
