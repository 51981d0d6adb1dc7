"""Signed bearer tokens (JWT) carrying user identity and role."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from storefront.exceptions import AuthenticationError


@dataclass(frozen=True)
class UserIdentity:
    """The caller resolved from a verified bearer token."""

    user_id: str
    role: str
    expires_at: datetime


class TokenService:
    """Issues and verifies HMAC-signed JWTs with a fixed lifetime.

    Tokens cannot be revoked; they stay valid until ``exp``.
    """

    def __init__(self, secret: str, ttl: timedelta = timedelta(days=7), algorithm: str = "HS256"):
        self._secret = secret
        self.ttl = ttl
        self.algorithm = algorithm

    def issue(self, user_id, role, now=None) -> str:
        issued_at = now or datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "role": role,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def authenticate(self, token: str | None) -> UserIdentity:
        if not token:
            raise AuthenticationError("Not authorized, token missing")

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "role", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired") from None
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token") from None

        return UserIdentity(
            user_id=claims["sub"],
            role=claims["role"],
            expires_at=datetime.fromtimestamp(claims["exp"], tz=UTC),
        )
