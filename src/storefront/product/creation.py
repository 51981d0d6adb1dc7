"""Product creation — command and handler.

Used to seed the catalogue; there is no HTTP route for catalogue management.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=200)
    description: Text(required=True)
    price_cents: Integer(required=True, min_value=0)
    category: String(required=True, max_length=100)
    sku: String(required=True, max_length=50)
    stock: Integer(default=0)
    rating: Float(default=0.0)
    num_reviews: Integer(default=0)
    featured: Boolean(default=False)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        repo = current_domain.repository_for(Product)

        if repo.find_by_sku(command.sku) is not None:
            raise ValidationError({"sku": [f"SKU {command.sku} is already in use"]})

        product = Product.add(
            name=command.name,
            description=command.description,
            price_cents=command.price_cents,
            category=command.category,
            sku=command.sku,
            stock=command.stock or 0,
            rating=command.rating or 0.0,
            num_reviews=command.num_reviews or 0,
            featured=bool(command.featured),
        )
        repo.add(product)

        logger.info("Product added", product_id=str(product.id), sku=product.sku)
        return str(product.id)
