"""
Client configuration using Pydantic Settings.

Loaded from GRANDLINE_* environment variables with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Terminal client settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GRANDLINE_",
        case_sensitive=False,
        extra="ignore",
    )

    backend_url: str = "http://localhost:5000"
    countries_url: str = "https://restcountries.com/v3.1"
    session_file: Path = Path.home() / ".grandline" / "session.json"
    request_timeout: float = 30.0

    # Listing behaviour
    debounce_seconds: float = 0.3
    page_size: int = 5


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get cached client settings instance."""
    return ClientSettings()
