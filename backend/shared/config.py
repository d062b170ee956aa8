"""
Backend settings.

Read from environment variables (or a `.env` file in the working
directory). Variable names match the field names, case-insensitively:
JWT_SECRET, CREDENTIAL_BACKEND, GUIDE_PROVIDER, GOOGLE_API_KEY, ...
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Grand Line Guide API"
    app_version: str = "0.1.0"
    debug: bool = Field(False, description="Expose /api/docs and /api/redoc")
    log_level: str = "info"

    host: str = "0.0.0.0"
    port: int = 5000
    reload: bool = False

    # The browser front end used to be served from these dev servers
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    jwt_secret: str = Field("", description="HS256 signing secret; tokens are rejected while empty")
    token_ttl_minutes: int = Field(60, gt=0)
    bcrypt_rounds: int = Field(10, ge=4, le=31)

    credential_backend: Literal["memory", "supabase"] = "memory"
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_users_table: str = "users"

    guide_provider: Literal["gemini", "openai"] = "gemini"
    guide_model: str = "gemini-2.0-flash"
    google_api_key: str = ""
    openai_api_key: str = ""


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process; call `get_settings.cache_clear()` to reload."""
    return Settings()
