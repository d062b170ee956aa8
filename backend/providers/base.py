"""Base classes and models for LLM providers."""

from abc import ABC, abstractmethod

from langchain_core.language_models.chat_models import BaseChatModel
from pydantic import BaseModel


class ModelConfig(BaseModel):
    """Configuration for the model that writes country guides.

    Attributes:
        provider_type: Provider key (e.g., "gemini")
        model_id: Model identifier (e.g., "gemini-2.0-flash")
        api_key: API key for the hosted provider
    """

    model_config = {"frozen": True}

    provider_type: str
    model_id: str
    api_key: str = ""


class GenerationParams(BaseModel):
    """Sampling parameters, fixed server-side and never taken from clients."""

    model_config = {"frozen": True}

    temperature: float = 1.2
    top_p: float = 0.9
    top_k: int = 20
    max_output_tokens: int = 1024


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Implementations are thin wrappers around a langchain chat model
    with provider-specific defaults.
    """

    @abstractmethod
    def get_llm(self, config: ModelConfig, params: GenerationParams) -> BaseChatModel:
        """Return a configured chat model client.

        Args:
            config: Model configuration with provider details
            params: Sampling parameters to bind to the client

        Returns:
            A configured langchain chat model

        Raises:
            ValueError: If the provider requires an API key and none is set
        """
        pass
