"""
Client exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError, NotFoundError


class CountryNotFoundError(NotFoundError):
    """Raised when a country code lookup returns an empty collection."""

    def __init__(self, code: str):
        super().__init__(
            f"No country found for code: {code}",
            code="COUNTRY_NOT_FOUND",
            details={"code": code},
        )


class BackendRequestError(ExternalServiceError):
    """
    Raised when a call to the Grand Line Guide backend fails.

    `message` carries the server's own error message when it sent one.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            service="backend",
            code="BACKEND_REQUEST_FAILED",
            details={"status_code": status_code},
        )
        self.status_code = status_code
