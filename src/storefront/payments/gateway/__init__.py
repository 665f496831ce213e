"""Payment gateway selection.

``PAYMENT_GATEWAY`` names the adapter built on first use (``fake`` when
unset). Tests install their own instance with ``set_gateway`` and drop it
with ``reset_gateway``.
"""

import os

from protean.exceptions import ConfigurationError

from storefront.payments.gateway.fake_adapter import FakeGateway
from storefront.payments.gateway.port import PaymentGateway

ADAPTERS: dict[str, type[PaymentGateway]] = {"fake": FakeGateway}

_active: PaymentGateway | None = None


def build_gateway(name: str | None = None) -> PaymentGateway:
    """Instantiate the adapter registered under ``name``."""
    name = (name or os.getenv("PAYMENT_GATEWAY") or "fake").lower()
    try:
        return ADAPTERS[name]()
    except KeyError:
        raise ConfigurationError(f"Unknown payment gateway: {name}") from None


def get_gateway() -> PaymentGateway:
    global _active
    if _active is None:
        _active = build_gateway()
    return _active


def set_gateway(gateway: PaymentGateway) -> None:
    global _active
    _active = gateway


def reset_gateway() -> None:
    global _active
    _active = None
