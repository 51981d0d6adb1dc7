"""Catalogue API package."""

from storefront.api.catalogue.routes import router

__all__ = ["router"]
