"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the storefront's validation rules
and use the camelCase field names of the API.
"""

import random
import uuid

from faker import Faker

fake = Faker()

PAYMENT_METHODS = ["credit_card", "paypal", "cash_on_delivery"]
CATEGORIES = ["electronics", "clothing", "home"]


def valid_email() -> str:
    """Generate unique emails that pass the structural email check.

    Rules: exactly one @, no spaces, domain with a dot, no leading/trailing
    or consecutive dots.
    """
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:6]}@{domain}"


def valid_password() -> str:
    """8-72 characters, well inside bcrypt's byte limit."""
    return fake.password(length=random.randint(10, 24))


def registration_data() -> dict:
    return {"name": fake.name()[:100], "email": valid_email(), "password": valid_password()}


def shipping_address() -> dict:
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "country": "US",
        "zipCode": fake.zipcode()[:20],
    }


def checkout_data() -> dict:
    return {"shippingAddress": shipping_address(), "paymentMethod": random.choice(PAYMENT_METHODS)}


def cart_item_data(product_id: str) -> dict:
    return {"productId": product_id, "quantity": random.randint(1, 3)}


def category_filter() -> str:
    return random.choice(CATEGORIES)
