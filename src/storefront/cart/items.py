"""Cart item management — commands and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.product.lookup import get_product

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class AddToCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)


@storefront.command(part_of="Cart")
class RemoveFromCart:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        # Raises ObjectNotFoundError before anything is written
        get_product(command.product_id)

        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            cart = Cart.open(command.user_id)

        cart.add_item(product_id=command.product_id, quantity=command.quantity)
        repo.add(cart)

        logger.debug(
            "Item added to cart",
            user_id=str(command.user_id),
            product_id=str(command.product_id),
            quantity=command.quantity,
        )
        return str(cart.id)

    @handle(RemoveFromCart)
    def remove_from_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.for_user(command.user_id)
        if cart is None:
            return None

        if cart.remove_item(command.product_id):
            repo.add(cart)
        return str(cart.id)
