"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks a simulated shopper from registration to checkout."""

    email: str | None = None
    password: str | None = None
    user_id: str | None = None
    token: str | None = None
    product_ids: list[str] = field(default_factory=list)
    cart_product_ids: list[str] = field(default_factory=list)
    order_numbers: list[str] = field(default_factory=list)

    @property
    def auth_headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}
