"""Demo catalogue used to populate an empty store."""

import structlog
from protean.utils.globals import current_domain

from storefront.product.creation import AddProduct
from storefront.product.product import Product
from storefront.shared.money import to_cents

logger = structlog.get_logger(__name__)

DEMO_PRODUCTS = [
    {
        "name": "Wireless Headphones",
        "description": "Over-ear Bluetooth headphones with active noise cancelling.",
        "price": "129.99",
        "category": "electronics",
        "stock": 40,
        "sku": "ELEC-HP-001",
        "rating": 4.5,
        "num_reviews": 128,
        "featured": True,
    },
    {
        "name": "Mechanical Keyboard",
        "description": "Tenkeyless keyboard with hot-swappable switches.",
        "price": "89.50",
        "category": "electronics",
        "stock": 25,
        "sku": "ELEC-KB-002",
        "rating": 4.7,
        "num_reviews": 64,
        "featured": True,
    },
    {
        "name": "Cotton T-Shirt",
        "description": "Organic cotton crew-neck t-shirt.",
        "price": "19.00",
        "category": "clothing",
        "stock": 200,
        "sku": "CLTH-TS-003",
        "rating": 4.1,
        "num_reviews": 37,
        "featured": False,
    },
    {
        "name": "Running Shoes",
        "description": "Lightweight trainers with a cushioned sole.",
        "price": "74.95",
        "category": "clothing",
        "stock": 60,
        "sku": "CLTH-RS-004",
        "rating": 4.3,
        "num_reviews": 89,
        "featured": True,
    },
    {
        "name": "Ceramic Mug",
        "description": "350 ml stoneware mug, dishwasher safe.",
        "price": "12.00",
        "category": "home",
        "stock": 150,
        "sku": "HOME-MG-005",
        "rating": 4.8,
        "num_reviews": 210,
        "featured": False,
    },
    {
        "name": "Desk Lamp",
        "description": "Dimmable LED desk lamp with USB charging port.",
        "price": "39.99",
        "category": "home",
        "stock": 0,
        "sku": "HOME-DL-006",
        "rating": 3.9,
        "num_reviews": 15,
        "featured": False,
    },
]


def seed_catalogue(products=None) -> int:
    """Add the demo products when the catalogue is empty. Returns how many were added."""
    if not current_domain.repository_for(Product).is_empty():
        logger.info("Catalogue already populated, skipping seed")
        return 0

    products = DEMO_PRODUCTS if products is None else products
    for data in products:
        current_domain.process(
            AddProduct(
                name=data["name"],
                description=data["description"],
                price_cents=to_cents(data["price"]),
                category=data["category"],
                sku=data["sku"],
                stock=data.get("stock", 0),
                rating=data.get("rating", 0.0),
                num_reviews=data.get("num_reviews", 0),
                featured=data.get("featured", False),
            ),
            asynchronous=False,
        )

    logger.info("Catalogue seeded", count=len(products))
    return len(products)
