import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Initialize the storefront domain once; every test then pushes its own domain context.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env

    from storefront.domain import storefront

    storefront.init()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def _storefront_domain():
    from storefront.domain import storefront

    return storefront


@pytest.fixture(scope="session", autouse=True)
def setup_db(_storefront_domain):
    from storefront.utils.db import drop_db, setup_db

    setup_db(_storefront_domain)

    yield

    drop_db(_storefront_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_storefront_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _storefront_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------
@pytest.fixture()
def settings():
    from storefront.config import Settings

    return Settings(
        _env_file=None,
        jwt_secret="storefront-test-suite-secret-0123456789",
        bcrypt_rounds=4,
        checkout_lock_timeout=1.0,
    )


@pytest.fixture()
def hasher(settings):
    from storefront.user.passwords import PasswordHasher

    return PasswordHasher(rounds=settings.bcrypt_rounds)


@pytest.fixture()
def tokens(settings):
    from storefront.user.tokens import TokenService

    return TokenService(secret=settings.jwt_secret, ttl=settings.token_ttl, algorithm=settings.jwt_algorithm)


@pytest.fixture()
def guard(settings):
    from storefront.cart.guard import CartGuard

    return CartGuard(timeout=settings.checkout_lock_timeout)


@pytest.fixture()
def client(settings):
    from fastapi.testclient import TestClient
    from storefront.api.application import create_app

    return TestClient(create_app(settings))


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
@pytest.fixture()
def make_product():
    """Add a product through the AddProduct command and return the stored aggregate."""
    from protean import current_domain
    from storefront.product.creation import AddProduct
    from storefront.product.product import Product

    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "name": f"Product {counter['n']}",
            "description": "A test product",
            "price_cents": 1000,
            "category": "general",
            "sku": f"TEST-{counter['n']:04d}",
            "stock": 10,
        }
        data.update(overrides)
        product_id = current_domain.process(AddProduct(**data), asynchronous=False)
        return current_domain.repository_for(Product).get(product_id)

    return _make


@pytest.fixture()
def make_user(hasher):
    """Register a user and return the stored aggregate. The raw password is ``correct-horse``."""
    from protean import current_domain
    from storefront.user.registration import register
    from storefront.user.user import User

    counter = {"n": 0}

    def _make(name=None, email=None, password="correct-horse"):
        counter["n"] += 1
        user_id = register(
            name=name or f"Shopper {counter['n']}",
            email=email or f"shopper{counter['n']}@example.com",
            raw_password=password,
            hasher=hasher,
        )
        return current_domain.repository_for(User).get(user_id)

    return _make
