"""Single-product reads."""

from protean.utils.globals import current_domain

from storefront.errors import NotFoundError
from storefront.inventory.inventory import InventoryRecord
from storefront.product.product import Product


def get_product(product_id) -> Product:
    product = current_domain.repository_for(Product).find(product_id)
    if product is None:
        raise NotFoundError("Product not found")
    return product


def get_product_with_inventory(product_id) -> tuple[Product, InventoryRecord | None]:
    """Return the product and its inventory record, which may be missing."""
    product = get_product(product_id)
    return product, current_domain.repository_for(InventoryRecord).for_product(product.id)
