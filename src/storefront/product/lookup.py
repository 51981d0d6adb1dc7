"""Catalog lookup — read-only access to products.

Every call reads the store of record; nothing is cached.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.product.product import Product


def get_product(product_id) -> Product:
    """Fetch a product by id, raising ``ObjectNotFoundError`` if it does not exist."""
    try:
        return current_domain.repository_for(Product).get(str(product_id))
    except ObjectNotFoundError:
        raise ObjectNotFoundError({"product_id": [f"Product {product_id} not found"]}) from None


def find_product(product_id) -> Product | None:
    try:
        return get_product(product_id)
    except ObjectNotFoundError:
        return None


def list_products(category: str | None = None, featured: bool | None = None) -> list[Product]:
    """All products, optionally narrowed by category and featured flag.

    The listing is not paginated.
    """
    return current_domain.repository_for(Product).listing(category=category, featured=featured)
