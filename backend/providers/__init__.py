"""LLM provider implementations."""

from .base import GenerationParams, LLMProvider, ModelConfig
from .factory import get_provider, get_providers

__all__ = ["GenerationParams", "LLMProvider", "ModelConfig", "get_provider", "get_providers"]
