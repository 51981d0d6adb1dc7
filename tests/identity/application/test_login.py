"""Application tests for login and token verification."""

import pytest
from storefront.exceptions import AuthenticationError
from storefront.user.authentication import INVALID_CREDENTIALS, login


class TestLogin:
    def test_correct_credentials_issue_an_accepted_token(self, make_user, hasher, tokens):
        user = make_user(email="jane@example.com")

        result = login("jane@example.com", "correct-horse", hasher=hasher, tokens=tokens)

        assert result.user.id == user.id
        identity = tokens.authenticate(result.token)
        assert identity.user_id == str(user.id)
        assert identity.role == "customer"

    def test_email_lookup_ignores_case(self, make_user, hasher, tokens):
        make_user(email="jane@example.com")
        result = login("  JANE@Example.com", "correct-horse", hasher=hasher, tokens=tokens)
        assert result.user.email == "jane@example.com"

    def test_wrong_password(self, make_user, hasher, tokens):
        make_user(email="jane@example.com")
        with pytest.raises(AuthenticationError) as exc:
            login("jane@example.com", "wrong-horse", hasher=hasher, tokens=tokens)
        assert exc.value.message == INVALID_CREDENTIALS

    def test_unknown_email_fails_with_the_same_message(self, hasher, tokens):
        with pytest.raises(AuthenticationError) as exc:
            login("nobody@example.com", "correct-horse", hasher=hasher, tokens=tokens)
        assert exc.value.message == INVALID_CREDENTIALS
