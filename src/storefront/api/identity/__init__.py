"""Identity API package."""

from storefront.api.identity.routes import router

__all__ = ["router"]
