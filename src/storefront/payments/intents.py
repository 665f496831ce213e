"""Payment intent creation."""

from uuid import uuid4

from protean.exceptions import ValidationError

from storefront.errors import InternalError
from storefront.payments.gateway import get_gateway
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_payment_intent(amount: float, currency: str = "usd") -> str:
    """Ask the active gateway for a payment intent. Returns the client secret."""
    if amount is None or amount <= 0:
        raise ValidationError({"amount": ["Amount must be greater than zero"]})

    result = get_gateway().create_payment_intent(
        amount=round(amount, 2),
        currency=currency,
        idempotency_key=uuid4().hex,
    )
    if not result.success:
        logger.error("payment_intent_failed", amount=amount, reason=result.failure_reason)
        raise InternalError("Error creating payment intent")

    logger.info("payment_intent_created", intent_id=result.intent_id, amount=amount)
    return result.client_secret
