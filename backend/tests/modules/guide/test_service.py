"""Tests for modules/guide/service.py."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from langchain_core.messages import AIMessage, HumanMessage

from modules.guide.exceptions import GuideGenerationError, InvalidCountryError
from modules.guide.interfaces import IGuideService
from modules.guide.service import GuideService, _extract_text, create_guide_service
from providers.base import GenerationParams, ModelConfig
from providers.gemini import GeminiProvider
from shared.exceptions import ExternalServiceError, ValidationError


class TestExtractText:
    def test_string(self):
        assert _extract_text("  hi  ") == "hi"

    def test_content_blocks(self):
        content = [{"type": "text", "text": "Hola "}, "amigo", {"type": "image_url", "image_url": "x"}]
        assert _extract_text(content) == "Hola amigo"

    def test_unknown(self):
        assert _extract_text(None) == ""


class TestGuideService:
    def test_implements_interface(self, guide_service):
        assert isinstance(guide_service, IGuideService)

    @pytest.mark.asyncio
    async def test_generate_guide(self, guide_service, fake_llm, fake_provider):
        """Should send one prompt naming the country and return trimmed text."""
        result = await guide_service.generate_guide("Germany")

        assert result == "Willkommen in Germany! 🇩🇪"
        messages = fake_llm.ainvoke.await_args.args[0]
        assert len(messages) == 1
        assert isinstance(messages[0], HumanMessage)
        assert "Germany" in messages[0].content
        fake_provider.get_llm.assert_called_once()

    @pytest.mark.asyncio
    async def test_sampling_params_forwarded(self, guide_service, fake_provider):
        await guide_service.generate_guide("Japan")
        config, params = fake_provider.get_llm.call_args.args
        assert config.model_id == "gemini-2.0-flash"
        assert params == GenerationParams(temperature=1.2, top_p=0.9, top_k=20, max_output_tokens=1024)

    @pytest.mark.asyncio
    async def test_client_created_once(self, guide_service, fake_provider):
        await guide_service.generate_guide("Japan")
        await guide_service.generate_guide("Peru")
        fake_provider.get_llm.assert_called_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("country", [None, "", "   ", 42, ["Germany"], {"name": "Germany"}])
    async def test_invalid_country(self, guide_service, fake_llm, country):
        """Should reject missing, empty and non-string input without calling the model."""
        with pytest.raises(InvalidCountryError) as exc_info:
            await guide_service.generate_guide(country)

        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.message == "Please provide a valid country name."
        fake_llm.ainvoke.assert_not_called()

    @pytest.mark.asyncio
    async def test_upstream_failure(self, guide_service, fake_llm):
        """Upstream errors become a generic generation error."""
        fake_llm.ainvoke.side_effect = RuntimeError("quota exceeded for key AIza-secret")

        with pytest.raises(GuideGenerationError) as exc_info:
            await guide_service.generate_guide("Germany")

        assert isinstance(exc_info.value, ExternalServiceError)
        assert "AIza-secret" not in exc_info.value.message
        assert exc_info.value.details["service"] == "gemini"

    @pytest.mark.asyncio
    async def test_empty_response(self, guide_service, fake_llm):
        fake_llm.ainvoke.return_value = AIMessage(content="   ")
        with pytest.raises(GuideGenerationError):
            await guide_service.generate_guide("Germany")

    @pytest.mark.asyncio
    async def test_missing_api_key_is_generation_error(self):
        """A missing key only surfaces when a guide is requested."""
        service = GuideService(
            GeminiProvider(),
            ModelConfig(provider_type="gemini", model_id="gemini-2.0-flash", api_key=""),
        )
        with pytest.raises(GuideGenerationError):
            await service.generate_guide("Germany")


class TestCreateGuideService:
    @patch("modules.guide.service.get_settings")
    def test_uses_configured_provider(self, mock_settings):
        mock_settings.return_value.guide_provider = "openai"
        mock_settings.return_value.guide_model = "gpt-4o-mini"
        mock_settings.return_value.google_api_key = ""
        mock_settings.return_value.openai_api_key = "sk-test"

        service = create_guide_service()

        assert service._config.provider_type == "openai"
        assert service._config.model_id == "gpt-4o-mini"
        assert service._config.api_key == "sk-test"

    @pytest.mark.asyncio
    @patch("providers.gemini.ChatGoogleGenerativeAI")
    @patch("modules.guide.service.get_settings")
    async def test_default_gemini_wiring(self, mock_settings, mock_chat_google):
        mock_settings.return_value.guide_provider = "gemini"
        mock_settings.return_value.guide_model = "gemini-2.0-flash"
        mock_settings.return_value.google_api_key = "AIza-test"
        mock_settings.return_value.openai_api_key = ""
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=AIMessage(content="Hallo!"))
        mock_chat_google.return_value = llm

        service = create_guide_service()

        assert await service.generate_guide("Germany") == "Hallo!"
        assert mock_chat_google.call_args.kwargs["google_api_key"] == "AIza-test"
