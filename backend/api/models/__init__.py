"""API models package."""

from .errors import ErrorResponse, ValidationErrorResponse

__all__ = ["ErrorResponse", "ValidationErrorResponse"]
