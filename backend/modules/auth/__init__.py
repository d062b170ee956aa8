"""
Authentication module.

Handles credential storage, token issuing/validation and the auth endpoints.

Public API:
- IAuthService, ICredentialStore, ITokenService: Interfaces
- CredentialRecord, TokenClaims: Models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, ICredentialStore, ITokenService
from .models import CredentialRecord, TokenClaims
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
    InvalidCredentialsError,
    DuplicateUserError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ICredentialStore",
    "ITokenService",
    # Models
    "CredentialRecord",
    "TokenClaims",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "DuplicateUserError",
]
