"""Tests for shared/config.py."""

import pydantic
import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "Grand Line Guide API"
        assert settings.debug is False
        assert settings.port == 5000
        assert settings.token_ttl_minutes == 60
        assert settings.bcrypt_rounds == 10
        assert settings.credential_backend == "memory"
        assert settings.guide_provider == "gemini"
        assert settings.guide_model == "gemini-2.0-flash"

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_secrets_from_env(self):
        """Settings should load secrets and API keys from environment variables."""
        with patch.dict(os.environ, {
            "JWT_SECRET": "s3cret",
            "GOOGLE_API_KEY": "test-google-key",
        }):
            settings = Settings(_env_file=None)
            assert settings.jwt_secret == "s3cret"
            assert settings.google_api_key == "test-google-key"

    def test_loads_supabase_backend_from_env(self):
        """Settings should switch the credential backend from the environment."""
        with patch.dict(os.environ, {
            "CREDENTIAL_BACKEND": "supabase",
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings(_env_file=None)
            assert settings.credential_backend == "supabase"
            assert settings.supabase_url == "https://test.supabase.co"


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2


class TestValidation:
    def test_rejects_bcrypt_rounds_below_minimum(self):
        """bcrypt refuses cost factors under 4."""
        with patch.dict(os.environ, {"BCRYPT_ROUNDS": "2"}):
            with pytest.raises(pydantic.ValidationError):
                Settings(_env_file=None)

    def test_rejects_unknown_credential_backend(self):
        with patch.dict(os.environ, {"CREDENTIAL_BACKEND": "redis"}):
            with pytest.raises(pydantic.ValidationError):
                Settings(_env_file=None)
