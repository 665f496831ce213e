"""Repository for the Order aggregate."""

from datetime import UTC, datetime

from storefront.domain import storefront
from storefront.order.order import Order

_EPOCH = datetime.min.replace(tzinfo=UTC)


def _placed_at(order):
    placed = order.order_date
    if placed is None:
        return _EPOCH
    return placed if placed.tzinfo else placed.replace(tzinfo=UTC)


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """Return the user's orders, newest first."""
        orders = self._dao.query.filter(user_id=str(user_id)).all().items
        return sorted(orders, key=_placed_at, reverse=True)
