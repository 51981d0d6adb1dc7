"""Process-wide settings, built once by the application factory."""

from datetime import timedelta

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "storefront-development-secret-change-me"


class Settings(BaseSettings):
    """Runtime settings read from ``STOREFRONT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", env_file=".env", extra="ignore")

    jwt_secret: str = Field(DEFAULT_JWT_SECRET, min_length=16)
    jwt_algorithm: str = "HS256"
    token_ttl_days: int = Field(7, ge=1)
    bcrypt_rounds: int = Field(12, ge=4, le=31)
    checkout_lock_timeout: float = Field(5.0, gt=0)
    cors_origins: list[str] = ["*"]
    seed_catalogue: bool = False

    @property
    def token_ttl(self) -> timedelta:
        return timedelta(days=self.token_ttl_days)

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET
