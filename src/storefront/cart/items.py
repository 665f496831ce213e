"""Cart item management: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront
from storefront.errors import InsufficientStockError, NotFoundError
from storefront.inventory.inventory import InventoryRecord
from storefront.product.product import Product


@storefront.command(part_of="ShoppingCart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="ShoppingCart")
class UpdateCartItemQuantity:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="ShoppingCart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command(part_of="ShoppingCart")
class ClearCart:
    user_id = Identifier(required=True)


def _ensure_available(product_id, quantity, product=None):
    """Reject quantities the product's inventory cannot cover."""
    record = current_domain.repository_for(InventoryRecord).for_product(product_id)
    if record is None or not record.can_fulfil(quantity):
        raise InsufficientStockError(
            product_id=product_id,
            product_name=product.name if product else str(product_id),
            requested=quantity,
            available=record.quantity if record else 0,
        )


@storefront.command_handler(part_of=ShoppingCart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        product = current_domain.repository_for(Product).find(command.product_id)
        if product is None:
            raise NotFoundError("Product not found")

        _ensure_available(command.product_id, command.quantity, product)

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.user_id) or ShoppingCart.create(user_id=command.user_id)
        cart.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)
        return str(cart.id)

    @handle(UpdateCartItemQuantity)
    def update_cart_item_quantity(self, command):
        product = current_domain.repository_for(Product).find(command.product_id)
        _ensure_available(command.product_id, command.quantity, product)

        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            raise NotFoundError("Item not found in cart")

        cart.set_item_quantity(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            raise NotFoundError("Item not found in cart")

        cart.remove_item(product_id=command.product_id)
        repo.add(cart)

    @handle(ClearCart)
    def clear_cart(self, command):
        repo = current_domain.repository_for(ShoppingCart)
        cart = repo.for_user(command.user_id)
        if cart is None or cart.is_empty:
            return

        cart.clear()
        repo.add(cart)
