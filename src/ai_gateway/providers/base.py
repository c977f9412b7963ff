# src/ai_gateway/providers/base.py
import logging
from abc import ABC, abstractmethod

from ai_gateway.errors import EmptyResponseError
from ai_gateway.models.diagnostic import NormalizedResult
from ai_gateway.models.review import ReviewRequest
from ai_gateway.review.normalizer import normalize
from ai_gateway.review.prompts import build_system_prompt, build_user_prompt


logger = logging.getLogger(__name__)


class LLMProvider(ABC):
    NAME: str = ""
    DEFAULT_MODEL: str = ""
    SUPPORTED_MODELS: tuple[str, ...] = ()

    TEMPERATURE = 0.3
    MAX_TOKENS = 4096

    @property
    def name(self) -> str:
        return self.NAME

    def supported_models(self) -> list[str]:
        return list(self.SUPPORTED_MODELS)

    def resolve_model(self, request: ReviewRequest) -> str:
        return request.ai_model or self.DEFAULT_MODEL

    async def review(self, request: ReviewRequest) -> NormalizedResult:
        """Run one review round trip against the vendor and normalize the reply."""
        model = self.resolve_model(request)
        system_prompt = build_system_prompt(request.language)
        user_prompt = build_user_prompt(request)

        text = await self.complete(model, system_prompt, user_prompt)
        if not text or not text.strip():
            raise EmptyResponseError(f"empty response from {self.name} model {model}")

        logger.info(f"{self.name} response length: {len(text)} chars")
        return normalize(text)

    @abstractmethod
    async def complete(self, model: str, system_prompt: str, user_prompt: str) -> str:
        """Send prompts to the vendor and return the plain reply text."""
        pass
