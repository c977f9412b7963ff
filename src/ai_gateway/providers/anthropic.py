# src/ai_gateway/providers/anthropic.py
import httpx
from ai_gateway.errors import EmptyResponseError, ProviderTransportError
from .base import LLMProvider


class ClaudeProvider(LLMProvider):
    NAME = "anthropic"
    DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
    SUPPORTED_MODELS = (
        "claude-3-5-sonnet-20241022",
        "claude-3-opus-20240229",
        "claude-3-sonnet-20240229",
        "claude-3-haiku-20240307",
    )

    API_URL = "https://api.anthropic.com/v1/messages"
    API_VERSION = "2023-06-01"

    def __init__(self, api_key: str, timeout: float = 120.0):
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": self.API_VERSION,
        }

    async def complete(self, model: str, system_prompt: str, user_prompt: str) -> str:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.API_URL,
                    headers=self._headers(),
                    json={
                        "model": model,
                        "max_tokens": self.MAX_TOKENS,
                        "temperature": self.TEMPERATURE,
                        "system": system_prompt,
                        "messages": [{"role": "user", "content": user_prompt}],
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise ProviderTransportError(f"failed to send request to Claude: {e}") from e

        if response.status_code != 200:
            raise ProviderTransportError(
                f"Claude request failed with status {response.status_code}: {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderTransportError(f"failed to decode Claude response: {e}") from e

        if not isinstance(data, dict):
            raise ProviderTransportError("unexpected Claude response shape")

        error = data.get("error")
        if error:
            message = error.get("message", error) if isinstance(error, dict) else error
            raise ProviderTransportError(f"Claude API error: {message}")

        content = data.get("content") or []
        if not isinstance(content, list):
            raise ProviderTransportError("unexpected Claude response shape: content")
        if not content:
            raise EmptyResponseError("no content in Claude response")

        block = content[0]
        if not isinstance(block, dict):
            raise ProviderTransportError("unexpected Claude response shape: content block")

        text = block.get("text") or ""
        if not isinstance(text, str):
            raise ProviderTransportError("unexpected Claude response shape: text")
        return text
