"""Shared BDD fixtures and step definitions for the ordering context."""

import pytest
from pytest_bdd import given, parsers
from storefront import services
from storefront.shared.money import to_cents


@pytest.fixture()
def products():
    """Catalogue products by name."""
    return {}


@pytest.fixture()
def checkout():
    """Container for the placed order and any captured error."""
    return {"order": None, "exc": None}


@given(parsers.cfparse('the catalogue contains "{name}" at {price}'))
def catalogue_contains(make_product, products, name, price):
    products[name] = make_product(name=name, price_cents=to_cents(price))


@given(parsers.cfparse('the shopper has {quantity:d} of "{name}" in their cart'))
def shopper_has_in_cart(guard, user_id, products, quantity, name):
    services.add_item(guard, user_id, products[name].id, quantity)
