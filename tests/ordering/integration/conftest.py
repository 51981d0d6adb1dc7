import pytest


@pytest.fixture()
def shopper(make_user):
    return make_user(email="shopper@example.com")


@pytest.fixture()
def auth_headers(shopper, tokens):
    return {"Authorization": f"Bearer {tokens.issue(shopper.id, shopper.role)}"}
