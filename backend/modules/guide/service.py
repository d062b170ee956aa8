"""
Country guide service implementation.

Renders the guide prompt for a country and forwards it to the configured
chat model. Failures are not retried.
"""

import logging
from typing import Any, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage

from providers.base import GenerationParams, LLMProvider, ModelConfig
from providers.factory import get_provider
from shared.config import get_settings

from .exceptions import GuideGenerationError, InvalidCountryError
from .interfaces import IGuideService
from .prompts import render_guide_prompt

logger = logging.getLogger(__name__)


def _extract_text(content: Any) -> str:
    """Flatten a chat model message content into plain text."""
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts).strip()
    return ""


class GuideService(IGuideService):
    """
    Implementation of the guide service.

    The chat model client is created on first use so a missing API key
    surfaces as a generation failure instead of a startup crash.
    """

    def __init__(
        self,
        provider: LLMProvider,
        config: ModelConfig,
        params: Optional[GenerationParams] = None,
    ):
        self._provider = provider
        self._config = config
        self._params = params or GenerationParams()
        self._llm: Optional[BaseChatModel] = None

    def _get_llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = self._provider.get_llm(self._config, self._params)
        return self._llm

    async def generate_guide(self, country: Any) -> str:
        if not isinstance(country, str) or not country.strip():
            raise InvalidCountryError()

        prompt = render_guide_prompt(country.strip())
        provider_type = self._config.provider_type

        try:
            llm = self._get_llm()
            response = await llm.ainvoke([HumanMessage(content=prompt)])
        except Exception:
            logger.exception(f"Guide generation failed ({provider_type}) for {country!r}")
            raise GuideGenerationError(provider_type)

        text = _extract_text(response.content)
        if not text:
            logger.error(f"Empty guide returned by {provider_type} for {country!r}")
            raise GuideGenerationError(provider_type)
        return text


def create_guide_service() -> GuideService:
    """Wire a GuideService from application settings."""
    settings = get_settings()
    api_keys = {
        "gemini": settings.google_api_key,
        "openai": settings.openai_api_key,
    }
    config = ModelConfig(
        provider_type=settings.guide_provider,
        model_id=settings.guide_model,
        api_key=api_keys.get(settings.guide_provider, ""),
    )
    return GuideService(get_provider(settings.guide_provider), config)
