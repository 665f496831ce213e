"""Admin order status updates: command and handler."""

from protean import handle
from protean.fields import DateTime, Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="Order")
class UpdateOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)
    tracking_number = String(max_length=255)
    estimated_delivery_date = DateTime()


@storefront.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_order_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        previous = order.status

        order.change_status(
            command.status,
            tracking_number=command.tracking_number,
            estimated_delivery_date=command.estimated_delivery_date,
        )
        repo.add(order)

        logger.info("order_status_changed", order_id=str(order.id), previous=previous, status=order.status)
