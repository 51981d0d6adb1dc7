"""BDD tests for catalogue browsing."""

from protean.exceptions import ObjectNotFoundError
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.product.lookup import get_product, list_products
from storefront.shared.money import to_cents

scenarios("features/browsing.feature")


@given("the catalogue contains:")
def catalogue_contains(make_product, datatable):
    header, *rows = datatable
    for row in rows:
        record = dict(zip(header, row, strict=True))
        make_product(
            name=record["name"],
            category=record["category"],
            price_cents=to_cents(record["price"]),
            featured=record["featured"] == "yes",
        )


@when("the shopper lists all products")
def list_all(catalogue_state):
    catalogue_state["listing"] = list_products()


@when(parsers.cfparse('the shopper lists products in category "{category}"'))
def list_category(catalogue_state, category):
    catalogue_state["listing"] = list_products(category=category)


@when("the shopper lists featured products")
def list_featured(catalogue_state):
    catalogue_state["listing"] = list_products(featured=True)


@when(parsers.cfparse('the shopper views product "{product_id}"'))
def view_product(catalogue_state, product_id):
    try:
        catalogue_state["product"] = get_product(product_id)
    except ObjectNotFoundError as exc:
        catalogue_state["exc"] = exc


@then(parsers.cfparse('they see "{names}" in that order'))
def they_see(catalogue_state, names):
    assert [p.name for p in catalogue_state["listing"]] == [n.strip() for n in names.split(",")]


@then("the product is reported as not found")
def not_found(catalogue_state):
    assert isinstance(catalogue_state["exc"], ObjectNotFoundError)
