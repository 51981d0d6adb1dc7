"""Login — exchanging email and password for a bearer token."""

from dataclasses import dataclass

import structlog
from protean.utils.globals import current_domain

from storefront.exceptions import AuthenticationError
from storefront.user.passwords import PasswordHasher
from storefront.user.tokens import TokenService
from storefront.user.user import User

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


def login(email: str, raw_password: str, hasher: PasswordHasher, tokens: TokenService) -> LoginResult:
    """Verify credentials and issue a token.

    Unknown emails and wrong passwords fail with the same message and the
    same hashing cost, so the response does not reveal which one it was.
    """
    user = current_domain.repository_for(User).find_by_email(email)

    if not hasher.verify(raw_password, user.password_hash if user else None) or user is None:
        logger.info("Login rejected")
        raise AuthenticationError(INVALID_CREDENTIALS)

    logger.info("User logged in", user_id=str(user.id))
    return LoginResult(token=tokens.issue(user.id, user.role), user=user)
