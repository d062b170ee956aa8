"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from api.app import create_app
from api.dependencies import get_auth_service, get_guide_service, reset_container
from client.countries import Country
from modules.auth.models import CredentialRecord
from modules.auth.service import AuthService
from modules.auth.store import InMemoryCredentialStore
from modules.auth.tokens import TokenService
from modules.guide.service import GuideService
from providers.base import LLMProvider, ModelConfig
from shared.config import get_settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"

# Lowest bcrypt cost factor, keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


def create_test_token(
    user_id: str = "test-user-123",
    username: str = "nami",
    expired: bool = False,
) -> str:
    """
    Create a test token for authentication.

    Args:
        user_id: User ID to include in the token
        username: Username to include in the token
        expired: If True, the token was issued two hours ago and has expired
    """
    now = datetime.now(timezone.utc)
    issued_at = now - timedelta(hours=2) if expired else now
    tokens = TokenService(TEST_JWT_SECRET, clock=lambda: issued_at)
    record = CredentialRecord(id=user_id, username=username, password_hash="unused")
    return tokens.issue(record)


def make_country(name: str, **overrides) -> Country:
    """Build a normalized country with plausible defaults."""
    fields = {
        "name": name,
        "population": 1_000_000,
        "region": "Europe",
        "languages": "English",
        "flag": f"https://flagcdn.com/w320/{name[:2].lower()}.png",
        "capital": "Capital City",
    }
    fields.update(overrides)
    return Country(**fields)


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings and the service container around each test."""
    get_settings.cache_clear()
    reset_container()
    yield
    get_settings.cache_clear()
    reset_container()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(TEST_JWT_SECRET)


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def auth_service(credential_store, token_service) -> AuthService:
    return AuthService(store=credential_store, tokens=token_service)


@pytest.fixture
def fake_llm() -> MagicMock:
    """Chat model double whose ainvoke returns a fixed guide."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content="  Willkommen in Germany! 🇩🇪  "))
    return llm


@pytest.fixture
def fake_provider(fake_llm) -> MagicMock:
    provider = MagicMock(spec=LLMProvider)
    provider.get_llm.return_value = fake_llm
    return provider


@pytest.fixture
def guide_service(fake_provider) -> GuideService:
    config = ModelConfig(provider_type="gemini", model_id="gemini-2.0-flash", api_key="test-key")
    return GuideService(fake_provider, config)


@pytest.fixture
def app(auth_service, guide_service):
    """Create a fresh app wired to test doubles."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    app.dependency_overrides[get_guide_service] = lambda: guide_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_token() -> str:
    """Create a valid auth token for testing."""
    return create_test_token()


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
