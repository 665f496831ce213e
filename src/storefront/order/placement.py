"""Checkout: turns a user's cart into an order and consumes stock.

Validation (cart not empty, products exist, stock covers every line) runs
before any write. The writes (order, inventory, product mirror, cart clear)
share the command handler's Unit of Work and commit together.

Stock locks for the cart's products are held by ``place_order`` across the
whole ``process`` call, commit included, so two checkouts of the last unit
serialize: the second one sees the decremented inventory and is rejected.
"""

import json

from protean import handle
from protean.fields import Float, Identifier, List, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import ShoppingCart
from storefront.domain import storefront
from storefront.errors import EmptyCartError, InsufficientStockError, ProductNotFoundError, StorefrontError
from storefront.inventory.inventory import InventoryRecord
from storefront.inventory.locks import stock_locks
from storefront.order.order import DeliveryMethod, Order, PaymentMethod
from storefront.product.product import Product
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartChanged(Exception):
    """The cart no longer holds the products whose locks were taken."""


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    payment_method = String(required=True, choices=PaymentMethod)
    payment_id = String(max_length=255)
    delivery_method = String(required=True, choices=DeliveryMethod)
    delivery_fee = Float(required=True, min_value=0.0)
    shipping_address = Text(required=True)  # JSON: address dict
    billing_address = Text(required=True)  # JSON: address dict
    product_ids = List(content_type=String)  # sorted ids whose stock locks are held


def _load(value):
    return json.loads(value) if isinstance(value, str) else value


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        cart_repo = current_domain.repository_for(ShoppingCart)
        product_repo = current_domain.repository_for(Product)
        inventory_repo = current_domain.repository_for(InventoryRecord)

        cart = cart_repo.for_user(command.user_id)
        if cart is None or cart.is_empty:
            raise EmptyCartError()

        if sorted(str(item.product_id) for item in cart.items) != sorted(command.product_ids or []):
            raise CartChanged()

        # Read-only validation pass
        checked = []
        for item in cart.items:
            product = product_repo.find(item.product_id)
            if product is None:
                raise ProductNotFoundError(item.product_id)

            record = inventory_repo.for_product(item.product_id)
            if record is None or not record.can_fulfil(item.quantity):
                raise InsufficientStockError(
                    product_id=item.product_id,
                    product_name=product.name,
                    requested=item.quantity,
                    available=record.quantity if record else 0,
                )
            checked.append((item, product, record))

        order = Order.create(
            user_id=command.user_id,
            lines=[
                {"product_id": str(item.product_id), "quantity": item.quantity, "price": product.price}
                for item, product, _ in checked
            ],
            payment_method=command.payment_method,
            payment_id=command.payment_id,
            delivery_method=command.delivery_method,
            delivery_fee=command.delivery_fee,
            shipping_address=_load(command.shipping_address),
            billing_address=_load(command.billing_address),
        )

        for item, product, record in checked:
            record.consume(item.quantity, order_id=str(order.id))
            product.sync_stock(record.quantity)
            inventory_repo.add(record)
            product_repo.add(product)

        cart.clear()
        cart_repo.add(cart)

        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            user_id=str(command.user_id),
            total=order.total,
            item_count=len(checked),
        )
        return str(order.id)


def _cart_product_ids(user_id):
    cart = current_domain.repository_for(ShoppingCart).for_user(user_id)
    return sorted(str(item.product_id) for item in cart.items) if cart else []


def place_order(
    user_id,
    payment_method,
    delivery_method,
    delivery_fee,
    shipping_address,
    billing_address,
    payment_id=None,
):
    """Check out the user's cart while holding the stock locks of its products.

    The cart is read to learn which locks to take; the handler compares the
    cart it loads under those locks against the same product set. If the set
    moved in between, the locks are released and the cycle restarts. Returns
    the new order's id.
    """
    while True:
        product_ids = _cart_product_ids(user_id)
        command = PlaceOrder(
            user_id=user_id,
            payment_method=payment_method,
            payment_id=payment_id,
            delivery_method=delivery_method,
            delivery_fee=delivery_fee,
            shipping_address=json.dumps(shipping_address),
            billing_address=json.dumps(billing_address),
            product_ids=product_ids,
        )
        with stock_locks.hold(product_ids):
            try:
                return current_domain.process(command, asynchronous=False)
            except CartChanged:
                logger.debug("checkout_retry", user_id=str(user_id))
                continue
            except StorefrontError as exc:
                logger.warning(
                    "checkout_rejected",
                    user_id=str(user_id),
                    reason=type(exc).__name__,
                    message=exc.message,
                )
                raise
