# src/ai_gateway/providers/__init__.py
from .base import LLMProvider
from .registry import ProviderRegistry
from .gemini import GeminiProvider
from .openai import OpenAIProvider
from .anthropic import ClaudeProvider

__all__ = ["LLMProvider", "ProviderRegistry", "GeminiProvider", "OpenAIProvider", "ClaudeProvider"]
