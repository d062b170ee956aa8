"""
Error bodies returned by the API.

Application errors and request-body validation failures both answer with
an `error` code and a human readable `message`.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body for any GrandLineError."""

    error: str = Field(..., description="Machine readable code, e.g. USER_EXISTS")
    message: str = Field(..., description="Text safe to show to the user")


class ValidationErrorResponse(BaseModel):
    """Body for a request that failed schema validation."""

    error: str = "Validation Error"
    message: str
    detail: list[dict[str, Any]] = Field(default_factory=list)
