"""Product aggregate — the catalogue's store of record.

Products are read-only from the ordering context's point of view: carts
reference them by id and checkout copies name and price into the order.
"""

import re
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Integer, String, Text

from storefront.domain import storefront
from storefront.product.events import ProductAdded
from storefront.shared.money import from_cents

_SKU_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")


@storefront.aggregate
class Product:
    """A sellable catalogue item with a unique SKU.

    The unit price is kept in integer cents.
    """

    name: String(required=True, max_length=200)
    description: Text(required=True)
    price_cents: Integer(required=True, min_value=0)
    category: String(required=True, max_length=100)
    stock: Integer(default=0, min_value=0)
    sku: String(required=True, max_length=50, min_length=3, unique=True)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    num_reviews: Integer(default=0, min_value=0)
    featured: Boolean(default=False)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def sku_must_be_valid_format(self):
        code = self.sku

        if not _SKU_PATTERN.match(code):
            raise ValidationError({"sku": ["SKU must contain only alphanumeric characters and hyphens"]})

        if code.startswith("-") or code.endswith("-"):
            raise ValidationError({"sku": ["SKU must not start or end with a hyphen"]})

        if "--" in code:
            raise ValidationError({"sku": ["SKU must not contain consecutive hyphens"]})

    @classmethod
    def add(
        cls,
        name,
        description,
        price_cents,
        category,
        sku,
        stock=0,
        rating=0.0,
        num_reviews=0,
        featured=False,
    ):
        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price_cents=price_cents,
            category=category,
            sku=sku,
            stock=stock,
            rating=rating,
            num_reviews=num_reviews,
            featured=featured,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                sku=sku,
                name=name,
                category=category,
                price_cents=price_cents,
                added_at=now,
            )
        )
        return product

    @property
    def price(self):
        return from_cents(self.price_cents)
