# src/ai_gateway/providers/openai.py
import logging
from openai import AsyncOpenAI, OpenAIError
from ai_gateway.errors import EmptyResponseError, ProviderTransportError
from .base import LLMProvider


logger = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    NAME = "openai"
    DEFAULT_MODEL = "gpt-4o"
    SUPPORTED_MODELS = (
        "gpt-4",
        "gpt-4-turbo",
        "gpt-4o",
        "gpt-3.5-turbo",
    )

    def __init__(self, api_key: str, base_url: str | None = None, timeout: float = 120.0):
        self.api_key = api_key
        # The caller bounds each review, so the SDK must not retry on its own
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
        )

    async def complete(self, model: str, system_prompt: str, user_prompt: str) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=self.TEMPERATURE,
                max_tokens=self.MAX_TOKENS,
            )
        except OpenAIError as e:
            raise ProviderTransportError(f"failed to create chat completion: {e}") from e

        if not response.choices:
            raise EmptyResponseError("no response from OpenAI")

        return response.choices[0].message.content or ""
