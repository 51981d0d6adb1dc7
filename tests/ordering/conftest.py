import pytest

ADDRESS = {
    "street": "742 Evergreen Terrace",
    "city": "Springfield",
    "state": "OR",
    "country": "US",
    "zip_code": "97403",
}


@pytest.fixture()
def address():
    return dict(ADDRESS)


@pytest.fixture()
def user_id():
    return "user-001"
