"""Storefront FastAPI application.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay in storefront/domain.toml:
#   - "test" / unset → in-memory stores
#   - "production"   → PostgreSQL via DATABASE_URL
from storefront.api.application import create_app
from storefront.config import Settings
from storefront.domain import storefront
from storefront.product.seed import seed_catalogue

storefront.init()

settings = Settings()

if settings.seed_catalogue:
    with storefront.domain_context():
        seed_catalogue()

app = create_app(settings)
