"""Cart rendering — resolves each line against the catalogue."""

from dataclasses import dataclass

from storefront.cart.cart import Cart
from storefront.product.lookup import find_product
from storefront.product.product import Product
from storefront.shared.money import line_total


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int
    product: Product | None


@dataclass(frozen=True)
class CartView:
    lines: list[CartLine]
    subtotal_cents: int


def price_cart(cart: Cart | None) -> CartView:
    """Current catalogue name and price for every line, plus a running subtotal.

    A missing cart renders as an empty one. Lines whose product no longer
    exists carry ``product=None`` and do not count towards the subtotal.
    """
    if cart is None:
        return CartView(lines=[], subtotal_cents=0)

    lines = []
    subtotal = 0
    for product_id, quantity in cart.snapshot():
        product = find_product(product_id)
        if product is not None:
            subtotal += line_total(product.price_cents, quantity)
        lines.append(CartLine(product_id=product_id, quantity=quantity, product=product))

    return CartView(lines=lines, subtotal_cents=subtotal)
