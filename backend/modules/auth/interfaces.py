"""
Authentication module interfaces.

Other modules should depend on these protocols, not the concrete
implementations. This enables testing with mocks and swapping the
credential storage backend through configuration.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser

from .models import CredentialRecord, TokenClaims


@runtime_checkable
class ICredentialStore(Protocol):
    """
    Durable mapping from username to salted password hash.

    Records are created once and never updated or deleted.
    """

    def create(self, username: str, password: str) -> CredentialRecord:
        """
        Hash the password and persist a new record.

        The uniqueness check and the insert are a single atomic operation.

        Raises:
            DuplicateUserError: If the username is already taken
        """
        ...

    def verify(self, username: str, password: str) -> bool:
        """
        Check a plaintext password against the stored hash.

        Raises:
            UserNotFoundError: If no record exists for the username
        """
        ...

    def get(self, username: str) -> Optional[CredentialRecord]:
        """Return the record for a username, or None."""
        ...


@runtime_checkable
class ITokenService(Protocol):
    """Issues and verifies signed, expiring bearer tokens."""

    def require_secret(self) -> None:
        """
        Check that tokens can be signed.

        Raises:
            AuthenticationError: If no signing secret is configured
        """
        ...

    def issue(self, record: CredentialRecord) -> str:
        """Issue a token for the given subject."""
        ...

    def verify(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Raises:
            MissingTokenError: If the token is empty
            ExpiredTokenError: If the token is at or past its expiry
            InvalidTokenError: If the signature or structure is invalid
        """
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    async def signup(self, username: str, password: str) -> str:
        """
        Create an account and return a token for it.

        Raises:
            ValidationError: If username or password is empty
            DuplicateUserError: If the username is already taken
        """
        ...

    async def login(self, username: str, password: str) -> str:
        """
        Exchange credentials for a token.

        Raises:
            InvalidCredentialsError: For an unknown user or a wrong password
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...
