"""Order placement — checks out the caller's cart into an Order.

The handler reads the cart, prices every line against the catalogue, stores
the order and clears the cart. Command handlers run inside a Unit of Work, so
either the order is stored and the cart emptied, or neither is persisted.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.order.order import Order
from storefront.product.lookup import get_product

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    shipping_address = Text(required=True)  # JSON: address dict
    payment_method = String(required=True, max_length=50)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        shipping_address = (
            json.loads(command.shipping_address)
            if isinstance(command.shipping_address, str)
            else command.shipping_address
        )

        cart_repo = current_domain.repository_for(Cart)
        cart = cart_repo.for_user(command.user_id)
        if cart is None or cart.is_empty:
            raise ValidationError({"cart": ["Cart is empty"]})

        lines = []
        for product_id, quantity in cart.snapshot():
            product = get_product(product_id)
            lines.append(
                {
                    "product_id": product_id,
                    "name": product.name,
                    "price_cents": product.price_cents,
                    "quantity": quantity,
                }
            )

        order = Order.place(
            user_id=command.user_id,
            lines=lines,
            shipping_address=shipping_address,
            payment_method=command.payment_method,
        )
        current_domain.repository_for(Order).add(order)

        cart.clear()
        cart_repo.add(cart)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_number=order.order_number,
            user_id=str(command.user_id),
            item_count=len(lines),
            total_cents=order.total_cents,
        )
        return str(order.id)
