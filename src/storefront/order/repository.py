"""Repository for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order
from storefront.shared.queries import fetch_all


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """All of a user's orders, newest first."""
        return fetch_all(self._dao.query.filter(user_id=str(user_id)).order_by("-created_at"))
