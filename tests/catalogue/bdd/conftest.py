"""Shared BDD fixtures for the catalogue context."""

import pytest


@pytest.fixture()
def catalogue_state():
    return {"listing": None, "product": None, "exc": None}
