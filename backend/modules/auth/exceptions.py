"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the API
error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ConflictError


class InvalidTokenError(AuthenticationError):
    """Raised when a token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Token required"):
        super().__init__(message, code="MISSING_TOKEN")


class UserNotFoundError(AuthenticationError):
    """Raised when no credential record exists for a username."""

    def __init__(self, username: str):
        super().__init__(
            f"User not found: {username}",
            code="USER_NOT_FOUND",
            details={"username": username},
        )


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when a login attempt fails.

    Deliberately carries no details: the caller must not learn whether
    the username or the password was wrong.
    """

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class DuplicateUserError(ConflictError):
    """Raised when signing up with a username that is already taken."""

    def __init__(self, username: str):
        super().__init__(
            "User already exists",
            code="USER_EXISTS",
            details={"username": username},
        )
