"""Tests for the Order aggregate."""

import pytest
from protean.exceptions import ValidationError

from storefront.order.events import OrderPlaced, OrderStatusChanged
from storefront.order.order import Order, OrderStatus

ADDRESS = {
    "full_name": "Jane Doe",
    "address_line1": "1 Main Street",
    "city": "Springfield",
    "state": "IL",
    "postal_code": "62701",
    "country": "US",
    "phone": "5551234567",
}


def _order(**overrides):
    defaults = {
        "user_id": "user-1",
        "lines": [
            {"product_id": "prod-a", "quantity": 2, "price": 10.0},
            {"product_id": "prod-b", "quantity": 1, "price": 20.0},
        ],
        "payment_method": "credit_card",
        "delivery_method": "standard",
        "delivery_fee": 5.0,
        "shipping_address": ADDRESS,
        "billing_address": ADDRESS,
    }
    defaults.update(overrides)
    return Order.create(**defaults)


class TestOrderCreation:
    def test_total_is_items_plus_delivery_fee(self):
        order = _order()
        assert order.total == 45.0
        assert order.items_total == 40.0

    def test_starts_pending_without_tracking(self):
        order = _order()
        assert order.status == OrderStatus.PENDING.value
        assert order.tracking_number is None
        assert order.estimated_delivery_date is None
        assert order.order_date is not None

    def test_one_item_per_line_with_price_snapshot(self):
        order = _order()
        prices = {item.product_id: (item.quantity, item.price) for item in order.items}
        assert prices == {"prod-a": (2, 10.0), "prod-b": (1, 20.0)}

    def test_raises_order_placed(self):
        order = _order()
        event = next(e for e in order._events if isinstance(e, OrderPlaced))
        assert event.total == 45.0
        assert event.order_id == str(order.id)

    def test_short_phone_rejected(self):
        with pytest.raises(ValidationError):
            _order(shipping_address={**ADDRESS, "phone": "555"})

    def test_unknown_payment_method_rejected(self):
        with pytest.raises(ValidationError):
            _order(payment_method="bitcoin")

    def test_negative_delivery_fee_rejected(self):
        with pytest.raises(ValidationError):
            _order(delivery_fee=-1.0)


class TestStatusTransitions:
    @pytest.mark.parametrize(
        "path",
        [
            ["processing", "shipped", "delivered"],
            ["cancelled"],
            ["processing", "cancelled"],
        ],
    )
    def test_allowed_paths(self, path):
        order = _order()
        for status in path:
            order.change_status(status)
        assert order.status == path[-1]

    @pytest.mark.parametrize(
        ("path", "target"),
        [
            ([], "shipped"),
            ([], "delivered"),
            (["processing", "shipped"], "cancelled"),
            (["cancelled"], "processing"),
            (["processing", "shipped", "delivered"], "pending"),
        ],
    )
    def test_rejected_transitions(self, path, target):
        order = _order()
        for status in path:
            order.change_status(status)
        with pytest.raises(ValidationError) as exc:
            order.change_status(target)
        assert "status" in exc.value.messages

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            _order().change_status("lost")

    def test_shipping_records_tracking(self):
        order = _order()
        order.change_status("processing")
        order.change_status("shipped", tracking_number="1Z999")
        assert order.tracking_number == "1Z999"
        events = [e for e in order._events if isinstance(e, OrderStatusChanged)]
        assert events[-1].previous_status == "processing"
        assert events[-1].new_status == "shipped"


class TestVisibility:
    def test_owner_and_admin_see_order(self):
        order = _order()
        assert order.is_visible_to("user-1")
        assert order.is_visible_to("someone-else", is_admin=True)
        assert not order.is_visible_to("someone-else")
