"""OpenAI provider, an alternative guide writer selected with GUIDE_PROVIDER=openai."""

from langchain_openai import ChatOpenAI

from .base import GenerationParams, LLMProvider, ModelConfig


class OpenAIProvider(LLMProvider):
    """Provider for OpenAI chat models (e.g. gpt-4o-mini).

    The OpenAI API has no top-k sampling, so `params.top_k` is dropped and
    `max_output_tokens` maps onto `max_tokens`.
    """

    def get_llm(self, config: ModelConfig, params: GenerationParams) -> ChatOpenAI:
        if not config.api_key:
            raise ValueError(
                "OpenAI API key is required. "
                "Set it via the OPENAI_API_KEY environment variable."
            )

        return ChatOpenAI(
            model=config.model_id,
            api_key=config.api_key,
            temperature=params.temperature,
            top_p=params.top_p,
            max_tokens=params.max_output_tokens,
        )
