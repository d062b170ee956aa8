"""Factory functions for creating LLM providers."""

from .base import LLMProvider
from .gemini import GeminiProvider
from .openai import OpenAIProvider


def get_providers() -> dict[str, LLMProvider]:
    """Get instances of each provider type.

    Returns:
        Dictionary mapping provider type names to provider instances.
        Keys are: "gemini", "openai"
    """
    return {
        "gemini": GeminiProvider(),
        "openai": OpenAIProvider(),
    }


def get_provider(provider_type: str) -> LLMProvider:
    """Look up a single provider by type.

    Raises:
        ValueError: If the provider type is unknown
    """
    providers = get_providers()
    if provider_type not in providers:
        raise ValueError(
            f"Unknown provider '{provider_type}'. "
            f"Expected one of: {', '.join(sorted(providers))}"
        )
    return providers[provider_type]
