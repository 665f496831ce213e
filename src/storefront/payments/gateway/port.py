"""Payment gateway port (abstract interface).

The storefront only asks a gateway for payment intents; card capture happens
between the shopper's browser and the gateway, which hands back the intent's
client secret.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentIntentResult:
    """Result of creating a payment intent."""

    success: bool
    intent_id: str | None = None
    client_secret: str | None = None
    failure_reason: str | None = None


class PaymentGateway(ABC):
    @abstractmethod
    def create_payment_intent(
        self,
        amount: float,
        currency: str,
        idempotency_key: str,
    ) -> PaymentIntentResult:
        """Open a payment intent for ``amount`` and return its client secret."""
        ...
