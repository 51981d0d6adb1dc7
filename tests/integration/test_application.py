"""Application-wide behaviour: health, error envelopes, CORS, settings."""

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient
from storefront.api.application import create_app
from storefront.config import DEFAULT_JWT_SECRET, Settings
from storefront.exceptions import ConflictError


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "message": "Server is running"}


def test_services_are_built_from_settings(settings):
    app = create_app(settings)
    assert app.state.settings is settings
    assert app.state.hasher.rounds == settings.bcrypt_rounds
    assert app.state.cart_guard.timeout == settings.checkout_lock_timeout
    assert app.state.tokens.ttl == settings.token_ttl


def test_cors_headers(client):
    response = client.get("/health", headers={"Origin": "http://shop.example.com"})
    assert response.headers["access-control-allow-origin"] in ("*", "http://shop.example.com")


class TestErrorEnvelope:
    @pytest.fixture()
    def failing_client(self, settings):
        app = create_app(settings)
        router = APIRouter()

        @router.get("/boom")
        async def boom():
            raise RuntimeError("database is on fire")

        @router.get("/busy")
        async def busy():
            raise ConflictError()

        app.include_router(router)
        return TestClient(app)

    def test_unexpected_errors_become_store_errors(self, failing_client):
        response = failing_client.get("/boom")
        assert response.status_code == 400
        assert response.json() == {"message": "The request could not be completed", "code": "store_error"}

    def test_later_requests_are_unaffected(self, failing_client):
        failing_client.get("/boom")
        assert failing_client.get("/health").status_code == 200

    def test_conflict(self, failing_client):
        response = failing_client.get("/busy")
        assert response.status_code == 409
        assert response.json()["code"] == "conflict"


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.jwt_algorithm == "HS256"
        assert settings.token_ttl_days == 7
        assert settings.token_ttl.days == 7
        assert settings.bcrypt_rounds == 12
        assert settings.uses_default_secret == (settings.jwt_secret == DEFAULT_JWT_SECRET)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_TOKEN_TTL_DAYS", "1")
        monkeypatch.setenv("STOREFRONT_BCRYPT_ROUNDS", "5")
        monkeypatch.setenv("STOREFRONT_SEED_CATALOGUE", "true")

        settings = Settings(_env_file=None)
        assert settings.token_ttl_days == 1
        assert settings.bcrypt_rounds == 5
        assert settings.seed_catalogue is True

    def test_short_secret_rejected(self):
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            Settings(_env_file=None, jwt_secret="short")
