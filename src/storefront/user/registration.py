"""User registration — command and handler.

The command carries a password hash, never the raw password: hashing happens
at the service boundary (see ``storefront.user.passwords``).
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.passwords import PasswordHasher
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create a new user account."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=255)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)

        # Email uniqueness spans aggregates, so it is checked against the store
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["A user with this email is already registered"]})

        user = User.register(
            name=command.name,
            email=command.email,
            password_hash=command.password_hash,
        )
        repo.add(user)

        logger.info("User registered", user_id=str(user.id), role=user.role)
        return str(user.id)


def register(name: str, email: str, raw_password: str, hasher: PasswordHasher) -> str:
    """Hash the password and register the user, returning the new user id."""
    return current_domain.process(
        RegisterUser(name=name, email=email, password_hash=hasher.hash(raw_password)),
        asynchronous=False,
    )
