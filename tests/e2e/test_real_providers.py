# tests/e2e/test_real_providers.py
"""
End-to-end tests for LLM providers with real API calls.

These tests require valid API credentials set in environment variables:
- GOOGLE_API_KEY: Google Gemini API key
- OPENAI_API_KEY: OpenAI API key
- ANTHROPIC_API_KEY: Anthropic API key

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from ai_gateway.models.review import GitInfo, ReviewRequest
from ai_gateway.providers.anthropic import ClaudeProvider
from ai_gateway.providers.gemini import GeminiProvider
from ai_gateway.providers.openai import OpenAIProvider


SIMPLE_DIFF = """--- a/math.py
+++ b/math.py
@@ -1,2 +1,5 @@
+def divide(a, b):
+    return a / b
"""


def _request() -> ReviewRequest:
    return ReviewRequest(
        language="python",
        git_diff=SIMPLE_DIFF,
        git_info=GitInfo(branch_name="e2e", pr_number="1"),
    )


@pytest.mark.e2e
@pytest.mark.asyncio
@pytest.mark.parametrize("env_var,provider_cls", [
    ("GOOGLE_API_KEY", GeminiProvider),
    ("OPENAI_API_KEY", OpenAIProvider),
    ("ANTHROPIC_API_KEY", ClaudeProvider),
])
async def test_real_review(env_var, provider_cls):
    """Test a provider with a real API call."""
    api_key = os.environ.get(env_var)
    if not api_key:
        pytest.skip(f"{env_var} not set")

    provider = provider_cls(api_key=api_key)
    result = await provider.review(_request())

    assert result.overview
    assert isinstance(result.diagnostics, list)
    print(f"\n{provider.name} overview: {result.overview}")
    print(f"{provider.name} diagnostics: {len(result.diagnostics)}")
