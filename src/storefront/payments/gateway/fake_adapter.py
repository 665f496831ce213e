"""Configurable fake payment gateway for development and testing.

Issues client secrets shaped like ``pi_<millis>_secret_<random>`` without any
external call, and records every call it receives.
"""

import secrets
import time

from storefront.payments.gateway.port import PaymentGateway, PaymentIntentResult


class FakeGateway(PaymentGateway):
    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Payment provider unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Payment provider unavailable") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_payment_intent(
        self,
        amount: float,
        currency: str,
        idempotency_key: str,
    ) -> PaymentIntentResult:
        self.calls.append(
            {
                "method": "create_payment_intent",
                "amount": amount,
                "currency": currency,
                "idempotency_key": idempotency_key,
            }
        )

        if not self.should_succeed:
            return PaymentIntentResult(success=False, failure_reason=self.failure_reason)

        intent_id = f"pi_{int(time.time() * 1000)}"
        return PaymentIntentResult(
            success=True,
            intent_id=intent_id,
            client_secret=f"{intent_id}_secret_{secrets.token_hex(4)}",
        )
