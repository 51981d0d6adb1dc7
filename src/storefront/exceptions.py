"""Exceptions raised by the storefront outside protean's own taxonomy.

Validation failures and missing objects use ``protean.exceptions.ValidationError``
and ``protean.exceptions.ObjectNotFoundError`` directly.
"""


class AuthenticationError(Exception):
    """Credentials or bearer token were missing, invalid or expired."""

    def __init__(self, message="Not authorized"):
        super().__init__(message)
        self.message = message


class ConflictError(Exception):
    """Another request holds the user's cart and did not release it in time."""

    def __init__(self, message="Another request is updating this cart, please retry"):
        super().__init__(message)
        self.message = message
