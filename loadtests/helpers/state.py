"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across
users.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a simulated shopper from sign-up to order."""

    username: str | None = None
    token: str | None = None
    product_ids: list[str] = field(default_factory=list)
    cart_lines: int = 0
    order_id: str | None = None

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}
