"""
Supabase client for the `supabase` credential backend.

Only created when CREDENTIAL_BACKEND=supabase; the in-memory backend never
touches it.
"""

import logging
from functools import lru_cache

from supabase import Client, create_client

from .config import get_settings

logger = logging.getLogger(__name__)


@lru_cache
def get_supabase_client() -> Client:
    """
    Service-role client shared by every Supabase repository.

    Signup writes rows on behalf of anonymous callers, so the anon key
    is not enough.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    settings = get_settings()
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
        )
        if not value
    ]
    if missing:
        raise RuntimeError(f"Supabase configuration missing. Set {', '.join(missing)}.")

    logger.info(f"Connecting credential store to {settings.supabase_url}")
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def reset_client_cache() -> None:
    """Drop the cached client so the next call re-reads settings."""
    get_supabase_client.cache_clear()
