"""Logging for the storefront: structlog rendering on top of stdlib handlers.

The environment (``ENV``, ``ENVIRONMENT`` or ``PROTEAN_ENV``) picks both the
default level and the renderer: JSON lines in production and staging, a
console renderer everywhere else. ``LOG_LEVEL`` overrides the level.

Credentials never reach a handler: ``redact_credentials`` masks any event
key that looks like a password, hash or token.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

LEVELS_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}
JSON_ENVS = ("production", "staging")

REDACTED = "[redacted]"
SENSITIVE_KEYS = ("password", "password_hash", "token", "authorization", "jwt_secret")

_ROTATE_BYTES = 10 * 1024 * 1024
_ROTATE_COUNT = 5


def current_env() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    """Level from ``LOG_LEVEL``, else the default for the current environment."""
    return os.getenv("LOG_LEVEL", LEVELS_BY_ENV.get(current_env(), "INFO")).upper()


def redact_credentials(_logger, _method_name: str, event_dict: dict) -> dict:
    """structlog processor masking credential-like keys."""
    for key in event_dict:
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def _rotating_handler(path: Path, level) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_ROTATE_BYTES,
        backupCount=_ROTATE_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def setup_stdlib_logging(level: str | None = None, log_dir: str = "logs", log_file_prefix: str = "storefront") -> None:
    """Route the root logger to stdout plus ``<prefix>.log`` and ``<prefix>_error.log``."""
    log_level = level or get_log_level()
    log_path = Path(log_dir)
    log_path.mkdir(exist_ok=True)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(log_level)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = [
        console,
        _rotating_handler(log_path / f"{log_file_prefix}.log", log_level),
        _rotating_handler(log_path / f"{log_file_prefix}_error.log", logging.ERROR),
    ]

    # Library chatter stays at WARNING whatever our own level is
    for noisy in ("urllib3", "asyncio", "protean", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


def setup_structlog() -> None:
    env = current_env()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        redact_credentials,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
    ]

    if env in JSON_ENVS:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=env == "development"))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str | None = None, log_dir: str = "logs", log_file_prefix: str = "storefront") -> None:
    setup_stdlib_logging(level=level, log_dir=log_dir, log_file_prefix=log_file_prefix)
    setup_structlog()


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Add context variables that will be included in all subsequent log messages."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


def bind_request(method: str, path: str, **extra: Any) -> None:
    """Start a fresh log context for one HTTP request."""
    clear_context()
    add_context(method=method, path=path, **extra)
