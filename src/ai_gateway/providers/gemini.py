# src/ai_gateway/providers/gemini.py
import httpx
from ai_gateway.errors import EmptyResponseError, ProviderTransportError
from .base import LLMProvider


class GeminiProvider(LLMProvider):
    NAME = "google"
    DEFAULT_MODEL = "gemini-2.0-flash"
    SUPPORTED_MODELS = (
        "gemini-2.0-flash",
        "gemini-1.5-pro",
        "gemini-1.5-flash",
        "gemini-pro",
    )
    MAX_TOKENS = 8192

    API_URL = "https://generativelanguage.googleapis.com/v1beta/models"

    def __init__(self, api_key: str, timeout: float = 120.0):
        self.api_key = api_key
        self.timeout = timeout

    async def complete(self, model: str, system_prompt: str, user_prompt: str) -> str:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.API_URL}/{model}:generateContent?key={self.api_key}",
                    json={
                        "contents": [{
                            "parts": [{"text": f"{system_prompt}\n\n{user_prompt}"}]
                        }],
                        "generationConfig": {
                            "temperature": self.TEMPERATURE,
                            "topP": 0.95,
                            "topK": 40,
                            "maxOutputTokens": self.MAX_TOKENS,
                        },
                    },
                    timeout=self.timeout,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderTransportError(
                f"Gemini request failed with status {e.response.status_code}: {e.response.text}"
            ) from e
        except httpx.HTTPError as e:
            raise ProviderTransportError(f"failed to send request to Gemini: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderTransportError(f"failed to decode Gemini response: {e}") from e

        return self._reply_text(data)

    def _reply_text(self, data) -> str:
        """Join the text parts of the first candidate."""
        if not isinstance(data, dict):
            raise ProviderTransportError("unexpected Gemini response shape")

        candidates = data.get("candidates") or []
        if not isinstance(candidates, list):
            raise ProviderTransportError("unexpected Gemini response shape: candidates")
        if not candidates:
            raise EmptyResponseError("no response candidates from Gemini")

        candidate = candidates[0]
        content = (candidate.get("content") or {}) if isinstance(candidate, dict) else None
        parts = (content.get("parts") or []) if isinstance(content, dict) else None
        if not isinstance(parts, list):
            raise ProviderTransportError("unexpected Gemini response shape: candidate")

        return "".join(
            part["text"] for part in parts
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
