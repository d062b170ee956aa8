"""
Bearer token issuing and verification.

Tokens are HS256 JWTs carrying the user ID (`sub`), the username and
`iat`/`exp` timestamps. They are stateless: nothing is stored server-side,
so a token stays valid until it expires or the signing secret changes.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from shared.exceptions import AuthenticationError

from .exceptions import ExpiredTokenError, InvalidTokenError, MissingTokenError
from .models import CredentialRecord, TokenClaims

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(hours=1)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Signs and verifies tokens with a symmetric server-held secret."""

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TTL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or _utcnow

    def require_secret(self) -> None:
        if not self._secret:
            raise AuthenticationError(
                "Server authentication not configured",
                code="AUTH_NOT_CONFIGURED",
            )

    def issue(self, record: CredentialRecord) -> str:
        self.require_secret()
        now = self._clock()
        payload = {
            "sub": record.id,
            "username": record.username,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        if not token:
            raise MissingTokenError()
        self.require_secret()

        # Time claims are checked against self._clock, not the wall clock
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={
                    "verify_exp": False,
                    "verify_iat": False,
                    "require": ["sub", "exp", "iat"],
                },
            )
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(str(e))

        if not all(isinstance(payload[claim], int) for claim in ("iat", "exp")):
            raise InvalidTokenError("Token time claims must be integers")
        now = int(self._clock().timestamp())
        if payload["iat"] > now:
            raise InvalidTokenError("Token issued in the future")
        if now >= payload["exp"]:
            raise ExpiredTokenError()
        if "username" not in payload:
            raise InvalidTokenError("Token is missing the username claim")
        return TokenClaims(**payload)
