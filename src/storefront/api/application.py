"""Storefront FastAPI application factory.

Every request runs inside the storefront domain context. Known domain errors
are mapped by ``storefront.api.errors``; anything else escaping a route is
logged and answered with a 400 ``store_error``.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from storefront.api.catalogue import router as product_router
from storefront.api.errors import STORE_ERROR_MESSAGE, error_response, register_exception_handlers
from storefront.api.identity import router as auth_router
from storefront.api.ordering import cart_router, order_router
from storefront.api.schemas import HealthResponse
from storefront.cart.guard import CartGuard
from storefront.config import Settings
from storefront.domain import storefront
from storefront.user.passwords import PasswordHasher
from storefront.user.tokens import TokenService
from storefront.utils.logging import bind_request, get_logger

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    if settings.uses_default_secret:
        logger.warning("Using the default JWT secret; set STOREFRONT_JWT_SECRET outside development")

    app = FastAPI(
        title="Storefront API",
        description="Products, carts and orders for the storefront",
    )

    app.state.settings = settings
    app.state.tokens = TokenService(
        secret=settings.jwt_secret,
        ttl=settings.token_ttl,
        algorithm=settings.jwt_algorithm,
    )
    app.state.hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.cart_guard = CartGuard(timeout=settings.checkout_lock_timeout)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the storefront domain context and bind request details to the log context."""
        bind_request(request.method, request.url.path)
        with storefront.domain_context():
            try:
                return await call_next(request)
            except Exception:
                logger.exception("Unhandled error while serving request")
                return error_response(400, "store_error", STORE_ERROR_MESSAGE)

    register_exception_handlers(app)

    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(order_router)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse()

    return app
