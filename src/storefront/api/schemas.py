"""Shared pydantic bases and envelopes for the HTTP API.

The wire format is camelCase; snake_case field names are accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(CamelModel):
    message: str
    code: str


class SuccessResponse(CamelModel):
    success: bool = True


class HealthResponse(CamelModel):
    status: str = "ok"
    message: str = "Server is running"
