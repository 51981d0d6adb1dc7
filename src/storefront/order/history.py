"""Order history — read-only listing of a user's orders."""

from protean.utils.globals import current_domain

from storefront.order.order import Order


def list_orders(user_id) -> list[Order]:
    """The user's orders, newest first. Not paginated."""
    return current_domain.repository_for(Order).for_user(user_id)
