import pytest
from storefront.utils.logging import REDACTED, get_log_level, redact_credentials


def test_credentials_are_masked():
    event = redact_credentials(None, "info", {"event": "User logged in", "user_id": "u-1", "password": "hunter22", "Token": "abc"})
    assert event == {"event": "User logged in", "user_id": "u-1", "password": REDACTED, "Token": REDACTED}


@pytest.mark.parametrize(
    "env, expected",
    [("production", "INFO"), ("staging", "INFO"), ("development", "DEBUG"), ("test", "WARNING"), ("elsewhere", "INFO")],
)
def test_level_follows_environment(monkeypatch, env, expected):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.setenv("PROTEAN_ENV", env)
    assert get_log_level() == expected


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "error")
    assert get_log_level() == "ERROR"
