# src/ai_gateway/providers/registry.py
from ai_gateway.errors import ProviderNotFoundError
from .base import LLMProvider


class ProviderRegistry:
    """Providers by identifier.

    Filled once during startup, then only read while requests are served,
    so lookups need no locking.
    """

    def __init__(self):
        self._providers: dict[str, LLMProvider] = {}

    def register(self, name: str, provider: LLMProvider) -> None:
        self._providers[name] = provider

    def get(self, name: str) -> LLMProvider:
        try:
            return self._providers[name]
        except KeyError:
            raise ProviderNotFoundError(name) from None

    def list(self) -> set[str]:
        return set(self._providers)
