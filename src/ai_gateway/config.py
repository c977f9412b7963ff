# src/ai_gateway/config.py
import logging
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ai_gateway.providers import ClaudeProvider, GeminiProvider, OpenAIProvider, ProviderRegistry


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    port: int = 8080

    # LLM Providers
    google_api_key: str | None = None
    openai_api_key: str | None = None
    anthropic_api_key: str | None = None

    # Defaults; read from DEFAULT_AI_PROVIDER / DEFAULT_AI_MODEL, short names also accepted
    default_provider: str = Field(
        default="google",
        validation_alias=AliasChoices("default_ai_provider", "default_provider"),
    )
    default_model: str = Field(
        default="gemini-2.0-flash",
        validation_alias=AliasChoices("default_ai_model", "default_model"),
    )
    max_diff_size: int = 10 * 1024 * 1024
    review_timeout: float = 120.0
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]


def build_registry(settings: Settings) -> ProviderRegistry:
    """Register one provider per configured API key."""
    registry = ProviderRegistry()

    if settings.google_api_key:
        registry.register(
            "google",
            GeminiProvider(api_key=settings.google_api_key, timeout=settings.review_timeout),
        )
        logger.info("Gemini provider registered")

    if settings.openai_api_key:
        registry.register(
            "openai",
            OpenAIProvider(api_key=settings.openai_api_key, timeout=settings.review_timeout),
        )
        logger.info("OpenAI provider registered")

    if settings.anthropic_api_key:
        registry.register(
            "anthropic",
            ClaudeProvider(api_key=settings.anthropic_api_key, timeout=settings.review_timeout),
        )
        logger.info("Claude provider registered")

    if not registry.list():
        raise RuntimeError("No AI providers configured. Set at least one provider API key.")

    return registry
