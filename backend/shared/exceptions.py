"""
Error hierarchy shared by the backend modules and the terminal client.

Modules raise subclasses of the categories below; api/errors.py turns a
category into an HTTP status, so new exceptions need no handler of their own.
"""

from typing import Any, Optional


class GrandLineError(Exception):
    """
    Root of every application error.

    Attributes:
        message: Human readable text, safe to show to the caller
        code: Machine readable identifier (defaults to the class name)
        details: Extra context for logs; not returned by the API
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__
        self.details = dict(details) if details else {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class ValidationError(GrandLineError):
    """The caller sent unusable input."""


class ConflictError(GrandLineError):
    """The request clashes with existing state, e.g. a taken username."""


class AuthenticationError(GrandLineError):
    """Credentials or tokens were missing, wrong or expired."""


class NotFoundError(GrandLineError):
    """A looked-up record does not exist."""


class ExternalServiceError(GrandLineError):
    """
    A call to a third party (generation API, backend, directory) failed.

    The failing service is recorded in `details["service"]`.
    """

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
