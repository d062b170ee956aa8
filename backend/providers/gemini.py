"""Google Gemini provider, the default writer of country guides.

Builds a ChatGoogleGenerativeAI client from langchain-google-genai with the
guide's sampling parameters bound at construction time.
"""

from langchain_google_genai import ChatGoogleGenerativeAI

from .base import GenerationParams, LLMProvider, ModelConfig


class GeminiProvider(LLMProvider):
    """Provider for Google Gemini models (e.g. gemini-2.0-flash)."""

    def get_llm(self, config: ModelConfig, params: GenerationParams) -> ChatGoogleGenerativeAI:
        """Return a Gemini chat client.

        Raises:
            ValueError: If no API key is configured
        """
        if not config.api_key:
            raise ValueError(
                "Google AI API key is required. "
                "Set it via the GOOGLE_API_KEY environment variable."
            )

        return ChatGoogleGenerativeAI(
            model=config.model_id,
            google_api_key=config.api_key,
            temperature=params.temperature,
            top_p=params.top_p,
            top_k=params.top_k,
            max_output_tokens=params.max_output_tokens,
        )
