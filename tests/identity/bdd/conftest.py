"""Shared BDD fixtures and step definitions for the identity context."""

import pytest
from pytest_bdd import given, parsers


@pytest.fixture()
def outcome():
    """Container for results and captured errors of When steps."""
    return {"result": None, "exc": None}


@given(parsers.cfparse('a registered user "{email}" with password "{password}"'))
def registered_user(make_user, email, password):
    return make_user(email=email, password=password)
