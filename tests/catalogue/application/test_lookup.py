"""Application tests for catalogue lookup."""

import pytest
from protean.exceptions import ObjectNotFoundError
from storefront.product.lookup import find_product, get_product, list_products


class TestGetProduct:
    def test_existing_product(self, make_product):
        product = make_product(name="Kettle")
        assert get_product(product.id).name == "Kettle"

    def test_missing_product(self):
        with pytest.raises(ObjectNotFoundError):
            get_product("does-not-exist")

    def test_find_returns_none_when_missing(self):
        assert find_product("does-not-exist") is None

    def test_reads_are_not_cached(self, make_product):
        from protean import current_domain
        from storefront.product.product import Product

        product = make_product(price_cents=1000)
        assert get_product(product.id).price_cents == 1000

        repo = current_domain.repository_for(Product)
        stored = repo.get(product.id)
        stored.price_cents = 1500
        repo.add(stored)

        assert get_product(product.id).price_cents == 1500


class TestListProducts:
    def test_ordered_by_name(self, make_product):
        make_product(name="Zither")
        make_product(name="Accordion")
        make_product(name="Maracas")

        assert [p.name for p in list_products()] == ["Accordion", "Maracas", "Zither"]

    def test_filter_by_category(self, make_product):
        make_product(name="Kettle", category="kitchen")
        make_product(name="Toaster", category="kitchen")
        make_product(name="Hammer", category="tools")

        assert [p.name for p in list_products(category="kitchen")] == ["Kettle", "Toaster"]

    def test_filter_by_featured(self, make_product):
        make_product(name="Kettle", featured=True)
        make_product(name="Toaster", featured=False)

        assert [p.name for p in list_products(featured=True)] == ["Kettle"]
        assert [p.name for p in list_products(featured=False)] == ["Toaster"]

    def test_empty_catalogue(self):
        assert list_products() == []

    def test_lists_past_one_page(self, make_product):
        for _ in range(105):
            make_product(category="bulk")

        assert len(list_products()) == 105
        assert len(list_products(category="bulk")) == 105
