"""Order reads for shoppers and admins."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.errors import AuthorizationError, NotFoundError
from storefront.order.order import Order


def list_orders(user_id) -> list[Order]:
    return current_domain.repository_for(Order).for_user(user_id)


def get_order(order_id, requester_id, is_admin=False) -> Order:
    """Fetch one order; only its owner or an admin may see it."""
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        raise NotFoundError("Order not found")

    if not order.is_visible_to(requester_id, is_admin=is_admin):
        raise AuthorizationError("You do not have permission to view this order")
    return order
