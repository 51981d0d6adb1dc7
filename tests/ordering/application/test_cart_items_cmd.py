"""Application tests for cart item management commands."""

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from storefront.cart.cart import Cart
from storefront.cart.items import AddToCart, RemoveFromCart


def _add(user_id, product_id, quantity=1):
    current_domain.process(
        AddToCart(user_id=user_id, product_id=product_id, quantity=quantity),
        asynchronous=False,
    )


def _cart(user_id):
    return current_domain.repository_for(Cart).for_user(user_id)


class TestAddToCartCommand:
    def test_first_add_creates_the_cart(self, make_product, user_id):
        product = make_product()
        assert _cart(user_id) is None

        _add(user_id, product.id, 2)

        cart = _cart(user_id)
        assert cart.snapshot() == [(str(product.id), 2)]

    def test_repeat_adds_accumulate(self, make_product, user_id):
        product = make_product()
        _add(user_id, product.id, 2)
        _add(user_id, product.id, 3)

        cart = _cart(user_id)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 5

    def test_one_cart_per_user(self, make_product, user_id):
        first, second = make_product(), make_product()
        _add(user_id, first.id)
        _add(user_id, second.id)
        _add("user-002", first.id)

        assert len(_cart(user_id).items) == 2
        assert len(_cart("user-002").items) == 1

    def test_unknown_product_rejected(self, user_id):
        with pytest.raises(ObjectNotFoundError):
            _add(user_id, "no-such-product")
        assert _cart(user_id) is None

    def test_zero_quantity_rejected(self, make_product, user_id):
        product = make_product()
        with pytest.raises(ValidationError):
            _add(user_id, product.id, 0)


class TestRemoveFromCartCommand:
    def test_remove_persists(self, make_product, user_id):
        keep, drop = make_product(), make_product()
        _add(user_id, keep.id)
        _add(user_id, drop.id)

        current_domain.process(RemoveFromCart(user_id=user_id, product_id=str(drop.id)), asynchronous=False)

        assert _cart(user_id).snapshot() == [(str(keep.id), 1)]

    def test_remove_absent_product_is_a_no_op(self, make_product, user_id):
        product = make_product()
        _add(user_id, product.id, 2)

        current_domain.process(RemoveFromCart(user_id=user_id, product_id="prod-999"), asynchronous=False)

        assert _cart(user_id).snapshot() == [(str(product.id), 2)]

    def test_remove_without_a_cart_is_a_no_op(self, user_id):
        current_domain.process(RemoveFromCart(user_id=user_id, product_id="prod-999"), asynchronous=False)
        assert _cart(user_id) is None
