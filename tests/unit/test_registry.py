# tests/unit/test_registry.py
import pytest
from ai_gateway.errors import ProviderNotFoundError
from ai_gateway.providers.gemini import GeminiProvider
from ai_gateway.providers.registry import ProviderRegistry


def test_get_unregistered_provider():
    registry = ProviderRegistry()

    with pytest.raises(ProviderNotFoundError, match="provider 'missing' not found"):
        registry.get("missing")


def test_register_and_get():
    registry = ProviderRegistry()
    provider = GeminiProvider(api_key="test-key")

    registry.register("x", provider)

    assert registry.get("x") is provider


def test_register_overwrites():
    registry = ProviderRegistry()
    first = GeminiProvider(api_key="a")
    second = GeminiProvider(api_key="b")

    registry.register("google", first)
    registry.register("google", second)

    assert registry.get("google") is second
    assert registry.list() == {"google"}


def test_list_registered_names():
    registry = ProviderRegistry()
    registry.register("x", GeminiProvider(api_key="a"))
    registry.register("y", GeminiProvider(api_key="b"))

    assert registry.list() == {"x", "y"}


def test_empty_registry_lists_nothing():
    assert ProviderRegistry().list() == set()
