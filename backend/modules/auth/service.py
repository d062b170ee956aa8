"""
Authentication service implementation.

Composes the credential store and the token service into the
signup / login / token validation flows.
"""

import asyncio
import logging
from datetime import timedelta
from typing import Optional

from shared.config import get_settings
from shared.exceptions import ValidationError
from shared.models import AuthenticatedUser

from .exceptions import InvalidCredentialsError, UserNotFoundError
from .interfaces import IAuthService, ICredentialStore, ITokenService
from .models import CredentialRecord
from .store import InMemoryCredentialStore, SupabaseCredentialStore
from .tokens import TokenService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    bcrypt work is CPU bound, so store calls run in a worker thread to
    keep the event loop responsive.
    """

    def __init__(self, store: ICredentialStore, tokens: ITokenService):
        self._store = store
        self._tokens = tokens

    async def signup(self, username: str, password: str) -> str:
        if not username or not password:
            raise ValidationError(
                "Username and password are required",
                code="MISSING_CREDENTIALS",
            )
        # Fail before storing anything if no token could be issued
        self._tokens.require_secret()
        record = await asyncio.to_thread(self._store.create, username, password)
        return self._tokens.issue(record)

    async def login(self, username: str, password: str) -> str:
        record = await asyncio.to_thread(self._authenticate, username, password)
        if record is None:
            logger.info("Rejected login attempt")
            raise InvalidCredentialsError()
        return self._tokens.issue(record)

    def _authenticate(self, username: str, password: str) -> Optional[CredentialRecord]:
        # Unknown user and wrong password collapse into the same outcome
        try:
            if not self._store.verify(username, password):
                return None
        except UserNotFoundError:
            return None
        return self._store.get(username)

    async def validate_token(self, token: str) -> AuthenticatedUser:
        claims = self._tokens.verify(token)
        return AuthenticatedUser(
            id=claims.sub,
            username=claims.username,
            iat=claims.iat,
            exp=claims.exp,
        )


def create_credential_store() -> ICredentialStore:
    """Build the credential store selected by CREDENTIAL_BACKEND."""
    settings = get_settings()
    if settings.credential_backend == "supabase":
        from shared.database import get_supabase_client

        return SupabaseCredentialStore(
            get_supabase_client(),
            table=settings.supabase_users_table,
            rounds=settings.bcrypt_rounds,
        )
    return InMemoryCredentialStore(rounds=settings.bcrypt_rounds)


def create_auth_service() -> AuthService:
    """Wire an AuthService from application settings."""
    settings = get_settings()
    return AuthService(
        store=create_credential_store(),
        tokens=TokenService(
            settings.jwt_secret,
            ttl=timedelta(minutes=settings.token_ttl_minutes),
        ),
    )
