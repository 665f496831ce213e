"""Order aggregate: the persisted result of checking out a cart.

Status lifecycle:
    pending → processing → shipped → delivered
    pending | processing → cancelled

Delivered and cancelled are terminal. Line prices are snapshots taken at
checkout and never follow later catalogue price changes.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from storefront.domain import storefront
from storefront.order.events import OrderPlaced, OrderStatusChanged


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"


class DeliveryMethod(Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    NEXT_DAY = "next_day"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@storefront.value_object(part_of="Order")
class Address:
    """A shipping or billing address captured at checkout time."""

    full_name = String(required=True, max_length=255)
    address_line1 = String(required=True, max_length=255)
    address_line2 = String(max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    postal_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)
    phone = String(required=True, min_length=10, max_length=30)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@storefront.entity(part_of="Order", limit=None)
class OrderItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@storefront.aggregate(limit=None)
class Order:
    user_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    total = Float(required=True, min_value=0.0)
    payment_method = String(required=True, choices=PaymentMethod)
    payment_id = String(max_length=255)
    delivery_method = String(required=True, choices=DeliveryMethod)
    delivery_fee = Float(required=True, min_value=0.0)
    estimated_delivery_date = DateTime()
    tracking_number = String(max_length=255)
    shipping_address = ValueObject(Address, required=True)
    billing_address = ValueObject(Address, required=True)
    items = HasMany(OrderItem)
    order_date = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(
        cls,
        user_id,
        lines,
        payment_method,
        delivery_method,
        delivery_fee,
        shipping_address,
        billing_address,
        payment_id=None,
    ):
        """Create a pending order from priced cart lines.

        Args:
            user_id: The shopper placing the order.
            lines: List of dicts with product_id, quantity and price, where
                   price is the product's current unit price.
            shipping_address: Dict matching the Address fields.
            billing_address: Dict matching the Address fields.
        """
        subtotal = sum(line["price"] * line["quantity"] for line in lines)

        order = cls(
            user_id=user_id,
            status=OrderStatus.PENDING.value,
            total=round(subtotal + delivery_fee, 2),
            payment_method=payment_method,
            payment_id=payment_id,
            delivery_method=delivery_method,
            delivery_fee=delivery_fee,
            shipping_address=Address(**shipping_address),
            billing_address=Address(**billing_address),
            order_date=datetime.now(UTC),
        )
        for line in lines:
            order.add_items(
                OrderItem(
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    price=line["price"],
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                items=json.dumps(
                    [{"product_id": str(i.product_id), "quantity": i.quantity, "price": i.price} for i in order.items]
                ),
                total=order.total,
                delivery_fee=delivery_fee,
                placed_at=order.order_date,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    @property
    def items_total(self) -> float:
        return round(sum(item.price * item.quantity for item in self.items), 2)

    def is_visible_to(self, user_id, is_admin=False) -> bool:
        return is_admin or str(self.user_id) == str(user_id)

    # -------------------------------------------------------------------
    # Status transitions
    # -------------------------------------------------------------------
    def change_status(self, new_status, tracking_number=None, estimated_delivery_date=None):
        try:
            target = OrderStatus(new_status)
        except ValueError:
            raise ValidationError({"status": [f"Unknown order status '{new_status}'"]})

        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

        self.status = target.value
        if tracking_number:
            self.tracking_number = tracking_number
        if estimated_delivery_date:
            self.estimated_delivery_date = estimated_delivery_date

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                tracking_number=self.tracking_number,
                changed_at=datetime.now(UTC),
            )
        )
