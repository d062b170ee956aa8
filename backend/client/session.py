"""
Client session: the stored token and username.

The session is an explicit object owned by the front end rather than
ambient global storage. It is persisted as a small JSON document so it
survives between terminal invocations.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .backend import BackendClient
from .exceptions import BackendRequestError

logger = logging.getLogger(__name__)


class SessionData(BaseModel):
    """On-disk session document."""

    token: Optional[str] = None
    username: Optional[str] = None


class Session:
    """Stored identity with explicit load / save / clear."""

    def __init__(self, path: Path):
        self._path = path
        self.token: Optional[str] = None
        self.username: Optional[str] = None

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def load(self) -> "Session":
        self.token = None
        self.username = None
        if not self._path.exists():
            return self
        try:
            data = SessionData.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, PydanticValidationError) as e:
            logger.warning(f"Ignoring unreadable session file {self._path}: {e}")
            return self
        self.token = data.token
        self.username = data.username
        return self

    def save(self, token: str, username: str) -> None:
        self.token = token
        self.username = username
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = SessionData(token=token, username=username).model_dump_json()
        self._path.write_text(payload, encoding="utf-8")
        self._path.chmod(0o600)

    def clear(self) -> None:
        self.token = None
        self.username = None
        self._path.unlink(missing_ok=True)


class BootstrapOutcome(str, Enum):
    READY = "ready"
    LOGIN_REQUIRED = "login_required"


@dataclass
class BootstrapResult:
    outcome: BootstrapOutcome
    user: Optional[dict[str, Any]] = None


async def bootstrap(session: Session, backend: BackendClient) -> BootstrapResult:
    """
    Check the stored token before showing the listing.

    Without a stored token the backend is not called at all. Any failed
    check of the protected endpoint clears the stored session.
    """
    session.load()
    if not session.is_authenticated:
        return BootstrapResult(BootstrapOutcome.LOGIN_REQUIRED)

    try:
        reply = await backend.protected(session.token)
    except BackendRequestError as e:
        logger.info(f"Stored session rejected: {e.message}")
        session.clear()
        return BootstrapResult(BootstrapOutcome.LOGIN_REQUIRED)

    if not isinstance(reply, dict):
        logger.warning(f"Protected endpoint returned {type(reply).__name__}, not an object; clearing session")
        session.clear()
        return BootstrapResult(BootstrapOutcome.LOGIN_REQUIRED)

    return BootstrapResult(BootstrapOutcome.READY, user=reply.get("user"))
