"""FastAPI dependencies resolving the services stored on ``app.state``."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.cart.guard import CartGuard
from storefront.config import Settings
from storefront.user.passwords import PasswordHasher
from storefront.user.tokens import TokenService, UserIdentity

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_tokens(request: Request) -> TokenService:
    return request.app.state.tokens


def get_hasher(request: Request) -> PasswordHasher:
    return request.app.state.hasher


def get_cart_guard(request: Request) -> CartGuard:
    return request.app.state.cart_guard


def current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_tokens),
) -> UserIdentity:
    """The caller behind the ``Authorization: Bearer`` header.

    A missing header, or one with another scheme, counts as a missing token.
    """
    return tokens.authenticate(credentials.credentials if credentials else None)
