# tests/integration/test_anthropic_provider.py
import json
import pytest
from ai_gateway.errors import EmptyResponseError, ProviderTransportError
from ai_gateway.models.review import ReviewRequest
from ai_gateway.providers.anthropic import ClaudeProvider


API_URL = "https://api.anthropic.com/v1/messages"


@pytest.mark.asyncio
async def test_claude_provider_returns_review(httpx_mock):
    httpx_mock.add_response(
        url=API_URL,
        json={"content": [{"type": "text", "text": 'Review:\n{"overview": "Looks good", "issues": []}'}]},
    )

    provider = ClaudeProvider(api_key="test-key")
    result = await provider.review(ReviewRequest(git_diff="+fn main() {}", language="rust"))

    assert result.overview == "Looks good"

    request = httpx_mock.get_request()
    assert request.headers["x-api-key"] == "test-key"
    assert request.headers["anthropic-version"] == "2023-06-01"
    body = json.loads(request.content)
    assert body["model"] == "claude-3-5-sonnet-20241022"
    assert body["max_tokens"] == 4096
    assert "specializing in rust" in body["system"]
    assert body["messages"][0]["role"] == "user"
    assert "+fn main() {}" in body["messages"][0]["content"]


@pytest.mark.asyncio
async def test_claude_provider_error_status(httpx_mock):
    httpx_mock.add_response(
        url=API_URL,
        status_code=529,
        json={"type": "error", "error": {"type": "overloaded_error", "message": "Overloaded"}},
    )

    provider = ClaudeProvider(api_key="test-key")
    with pytest.raises(ProviderTransportError, match="529"):
        await provider.review(ReviewRequest(git_diff="+x"))


@pytest.mark.asyncio
async def test_claude_provider_error_payload(httpx_mock):
    httpx_mock.add_response(
        url=API_URL,
        json={"error": {"type": "invalid_request_error", "message": "bad model"}},
    )

    provider = ClaudeProvider(api_key="test-key")
    with pytest.raises(ProviderTransportError, match="bad model"):
        await provider.review(ReviewRequest(git_diff="+x"))


@pytest.mark.asyncio
async def test_claude_provider_empty_content(httpx_mock):
    httpx_mock.add_response(url=API_URL, json={"content": []})

    provider = ClaudeProvider(api_key="test-key")
    with pytest.raises(EmptyResponseError):
        await provider.review(ReviewRequest(git_diff="+x"))


@pytest.mark.asyncio
async def test_claude_provider_non_object_body(httpx_mock):
    httpx_mock.add_response(url=API_URL, json=["unexpected"])

    provider = ClaudeProvider(api_key="test-key")
    with pytest.raises(ProviderTransportError, match="unexpected Claude response shape"):
        await provider.review(ReviewRequest(git_diff="+x"))


@pytest.mark.asyncio
async def test_claude_provider_non_object_content_block(httpx_mock):
    httpx_mock.add_response(url=API_URL, json={"content": ["x"]})

    provider = ClaudeProvider(api_key="test-key")
    with pytest.raises(ProviderTransportError, match="content block"):
        await provider.review(ReviewRequest(git_diff="+x"))
