# src/ai_gateway/review/engine.py
import asyncio
import logging

from ai_gateway.errors import InvalidRequestError, ProviderTimeoutError
from ai_gateway.models.diagnostic import ReviewResponse, Source
from ai_gateway.models.review import ReviewRequest
from ai_gateway.providers.registry import ProviderRegistry


logger = logging.getLogger(__name__)

SOURCE_NAME = "ai-review"


class ReviewEngine:
    def __init__(
        self,
        registry: ProviderRegistry,
        default_provider: str = "google",
        default_model: str = "",
        language: str = "unknown",
        timeout: float = 120.0,
    ):
        self.registry = registry
        self.default_provider = default_provider
        self.default_model = default_model
        self.language = language
        self.timeout = timeout

    def apply_defaults(self, request: ReviewRequest) -> ReviewRequest:
        """Fill in provider, model and language left empty by the caller."""
        updates = {}
        provider = request.ai_provider or self.default_provider
        if provider != request.ai_provider:
            updates["ai_provider"] = provider
        # The configured model only belongs to the default provider; other
        # providers fall back to their own default model
        if not request.ai_model and provider == self.default_provider:
            updates["ai_model"] = self.default_model
        if not request.language:
            updates["language"] = self.language
        return request.model_copy(update=updates) if updates else request

    async def review(self, request: ReviewRequest) -> ReviewResponse:
        """Run a single bounded review and wrap the result in the response envelope."""
        if not request.git_diff:
            raise InvalidRequestError("Empty git diff")

        request = self.apply_defaults(request)
        logger.info(
            f"Review request: provider={request.ai_provider}, model={request.ai_model}, "
            f"language={request.language}, diff_size={len(request.git_diff)} bytes"
        )

        provider = self.registry.get(request.ai_provider)

        try:
            result = await asyncio.wait_for(provider.review(request), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise ProviderTimeoutError(
                f"{provider.name} review timed out after {self.timeout:g}s"
            ) from None

        logger.info(f"Review completed: {len(result.diagnostics)} diagnostics found")
        return ReviewResponse(
            source=Source(name=SOURCE_NAME),
            diagnostics=result.diagnostics,
            overview=result.overview,
        )
