"""Ordering services used by the HTTP layer.

Every cart mutation and every checkout runs under the caller's ``CartGuard``
lock, so two requests for the same user never interleave.
"""

import json

from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.cart.guard import CartGuard
from storefront.cart.items import AddToCart, RemoveFromCart
from storefront.order.order import Order
from storefront.order.placement import PlaceOrder


def get_cart(user_id) -> Cart | None:
    return current_domain.repository_for(Cart).for_user(user_id)


def add_item(guard: CartGuard, user_id, product_id, quantity: int = 1) -> Cart:
    with guard.hold(user_id):
        current_domain.process(
            AddToCart(user_id=str(user_id), product_id=str(product_id), quantity=quantity),
            asynchronous=False,
        )
        return get_cart(user_id)


def remove_item(guard: CartGuard, user_id, product_id) -> Cart | None:
    with guard.hold(user_id):
        current_domain.process(
            RemoveFromCart(user_id=str(user_id), product_id=str(product_id)),
            asynchronous=False,
        )
        return get_cart(user_id)


def place_order(guard: CartGuard, user_id, shipping_address: dict, payment_method: str) -> Order:
    with guard.hold(user_id):
        order_id = current_domain.process(
            PlaceOrder(
                user_id=str(user_id),
                shipping_address=json.dumps(shipping_address),
                payment_method=payment_method,
            ),
            asynchronous=False,
        )
    return current_domain.repository_for(Order).get(order_id)
