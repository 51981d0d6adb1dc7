"""Application tests for demo catalogue seeding."""

from protean import current_domain
from storefront.product.product import Product
from storefront.product.seed import DEMO_PRODUCTS, seed_catalogue


def test_seed_populates_an_empty_catalogue():
    assert seed_catalogue() == len(DEMO_PRODUCTS)

    repo = current_domain.repository_for(Product)
    assert len(repo.listing()) == len(DEMO_PRODUCTS)
    headphones = repo.find_by_sku("ELEC-HP-001")
    assert headphones.price_cents == 12999


def test_seed_skips_a_populated_catalogue(make_product):
    make_product()
    assert seed_catalogue() == 0
    assert len(current_domain.repository_for(Product).listing()) == 1


def test_seed_with_custom_products():
    added = seed_catalogue(
        [
            {
                "name": "Notebook",
                "description": "A5 dotted notebook",
                "price": "4.50",
                "category": "stationery",
                "sku": "STAT-NB-001",
            }
        ]
    )
    assert added == 1
    assert current_domain.repository_for(Product).find_by_sku("STAT-NB-001").price_cents == 450
