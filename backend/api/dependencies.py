"""
Service wiring for route handlers.

Routes depend on `get_auth_service` / `get_guide_service`; both resolve
through one process-wide ServiceContainer that builds each service from
settings on first use. Tests swap services via `app.dependency_overrides`
or start over with `reset_container()`.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.guide.interfaces import IGuideService


class ServiceContainer:
    """
    Lazily built service singletons.

    The auth service owns the credential store, so with the in-memory
    backend accounts live exactly as long as the container.
    """

    def __init__(self) -> None:
        self._auth: Optional["IAuthService"] = None
        self._guide: Optional["IGuideService"] = None

    @property
    def auth(self) -> "IAuthService":
        if self._auth is None:
            # Imported here: the auth routes import this module
            from modules.auth.service import create_auth_service
            self._auth = create_auth_service()
        return self._auth

    @property
    def guide(self) -> "IGuideService":
        if self._guide is None:
            from modules.guide.service import create_guide_service
            self._guide = create_guide_service()
        return self._guide


_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Forget every built service; the next request rebuilds from settings."""
    global _container
    _container = None


def get_auth_service() -> "IAuthService":
    return get_container().auth


def get_guide_service() -> "IGuideService":
    return get_container().guide
