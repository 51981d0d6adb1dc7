from decimal import Decimal

import pytest
from protean.exceptions import ValidationError
from storefront.product.events import ProductAdded
from storefront.product.product import Product


def _add(**overrides):
    data = {
        "name": "Wireless Mouse",
        "description": "Two-button mouse",
        "price_cents": 2499,
        "category": "electronics",
        "sku": "ELEC-MS-001",
    }
    data.update(overrides)
    return Product.add(**data)


class TestProductCreation:
    def test_defaults(self):
        product = _add()
        assert product.stock == 0
        assert product.rating == 0.0
        assert product.num_reviews == 0
        assert product.featured is False
        assert product.created_at is not None

    def test_price_as_decimal(self):
        assert _add().price == Decimal("24.99")

    def test_raises_product_added(self):
        product = _add()
        event = product._events[0]
        assert isinstance(event, ProductAdded)
        assert event.sku == "ELEC-MS-001"
        assert event.price_cents == 2499


class TestProductValidation:
    @pytest.mark.parametrize("sku", ["AB", "-ABC", "ABC-", "AB--C", "AB C", "AB_C"])
    def test_invalid_sku(self, sku):
        with pytest.raises(ValidationError) as exc:
            _add(sku=sku)
        assert "sku" in exc.value.messages

    def test_negative_price(self):
        with pytest.raises(ValidationError):
            _add(price_cents=-1)

    def test_negative_stock(self):
        with pytest.raises(ValidationError):
            _add(stock=-5)

    @pytest.mark.parametrize("rating", [-0.1, 5.1])
    def test_rating_out_of_range(self, rating):
        with pytest.raises(ValidationError):
            _add(rating=rating)

    def test_free_product_allowed(self):
        assert _add(price_cents=0).price == Decimal("0.00")
