"""Conversion of domain exceptions into HTTP error responses.

Every error body is ``{"message": ..., "code": ...}``.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError, ValidationError

from storefront.api.schemas import ErrorResponse
from storefront.exceptions import AuthenticationError, ConflictError

STORE_ERROR_MESSAGE = "The request could not be completed"


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(message=message, code=code).model_dump())


def first_message(messages, default: str) -> str:
    """Pick a single human-readable message out of protean's error payloads.

    ``messages`` is either a string or a ``{field: [message, ...]}`` mapping.
    """
    if isinstance(messages, str) and messages:
        return messages
    if isinstance(messages, dict):
        for errors in messages.values():
            if isinstance(errors, (list, tuple)) and errors:
                return str(errors[0])
            if errors:
                return str(errors)
    return default


def _request_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error['msg']}" if location else error["msg"]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return error_response(400, "validation_error", first_message(exc.messages, "Invalid request"))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        return error_response(400, "validation_error", _request_validation_message(exc))

    @app.exception_handler(AuthenticationError)
    async def authentication_error(request: Request, exc: AuthenticationError):
        return error_response(401, "auth_error", exc.message)

    @app.exception_handler(ObjectNotFoundError)
    async def not_found(request: Request, exc: ObjectNotFoundError):
        return error_response(404, "not_found", first_message(getattr(exc, "messages", None), "Not found"))

    @app.exception_handler(ConflictError)
    async def conflict(request: Request, exc: ConflictError):
        return error_response(409, "conflict", exc.message)
