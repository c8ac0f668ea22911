"""Tests for the Anthropic-backed repair attempt."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import anthropic
import httpx
import pytest

from skill_matrix_agents.remote.anthropic_attempt import AnthropicRepairAttempt, build_messages
from skill_matrix_core.exceptions import StrategyFailedError, Violation
from tests.mocks.mock_settings import make_settings

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _make_response(*texts: str, extra_blocks: list[object] | None = None) -> SimpleNamespace:
    """Build a fake Messages API response with usage attributes."""
    blocks: list[object] = [SimpleNamespace(type="text", text=t) for t in texts]
    blocks.extend(extra_blocks or [])
    return SimpleNamespace(
        content=blocks,
        usage=SimpleNamespace(input_tokens=120, output_tokens=80),
    )


def _make_client(*results: object) -> MagicMock:
    """Build a client whose messages.create returns or raises each result in turn."""
    client = MagicMock()
    client.messages.create = AsyncMock(side_effect=list(results))
    return client


def _status_error(cls: type[anthropic.APIStatusError], status: int) -> anthropic.APIStatusError:
    response = httpx.Response(status, request=_REQUEST)
    return cls("boom", response=response, body=None)


@pytest.mark.unit
class TestBuildMessages:
    """Test build_messages."""

    def test_first_request(self) -> None:
        """The first request embeds the schema and document."""
        messages = build_messages("Senior Go developer")
        assert len(messages) == 1
        content = messages[0]["content"]
        assert messages[0]["role"] == "user"
        assert "Senior Go developer" in content
        assert '"mustHave": string[]' in content
        assert "<previous_answer>" not in content

    def test_repair_request(self) -> None:
        """A repair request carries the prior output and each violation."""
        messages = build_messages(
            "doc",
            [Violation("seniority", "bad value"), Violation("summary", "too long")],
            '{"title": "X"}',
        )
        content = messages[0]["content"]
        assert '<previous_answer>\n{"title": "X"}\n</previous_answer>' in content
        assert "- seniority: bad value\n- summary: too long" in content


@pytest.mark.unit
class TestAnthropicRepairAttempt:
    """Test AnthropicRepairAttempt."""

    def test_missing_key_raises(self) -> None:
        """Without a key or an injected client the attempt cannot be built."""
        with pytest.raises(StrategyFailedError, match="Missing Anthropic API key"):
            AnthropicRepairAttempt(make_settings())

    @pytest.mark.asyncio
    async def test_returns_joined_text(self) -> None:
        """Text blocks are joined and non-text blocks ignored."""
        client = _make_client(
            _make_response('{"title": ', '"X"}', extra_blocks=[SimpleNamespace(type="tool_use")])
        )
        attempt = AnthropicRepairAttempt(make_settings(), client=client)

        raw = await attempt.attempt("doc")

        assert raw == '{"title": "X"}'
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-haiku-4-5-20251001"
        assert kwargs["max_tokens"] == 2048
        assert kwargs["temperature"] == 0

    @pytest.mark.asyncio
    async def test_transient_error_is_retried(self) -> None:
        """Connection errors are retried within the transport budget."""
        client = _make_client(
            anthropic.APIConnectionError(request=_REQUEST),
            _status_error(anthropic.InternalServerError, 529),
            _make_response("{}"),
        )
        attempt = AnthropicRepairAttempt(make_settings(transport_retry_max=2), client=client)

        assert await attempt.attempt("doc") == "{}"
        assert client.messages.create.await_count == 3

    @pytest.mark.asyncio
    async def test_transient_exhaustion_raises(self) -> None:
        """The first request plus every retry is made before giving up."""
        client = _make_client(*[_status_error(anthropic.RateLimitError, 429) for _ in range(3)])
        attempt = AnthropicRepairAttempt(make_settings(transport_retry_max=2), client=client)

        with pytest.raises(StrategyFailedError, match="AI request failed: 429"):
            await attempt.attempt("doc")
        assert client.messages.create.await_count == 3

    @pytest.mark.asyncio
    async def test_zero_retries_makes_one_request(self) -> None:
        """transport_retry_max=0 disables transport retries."""
        client = _make_client(anthropic.APIConnectionError(request=_REQUEST), _make_response("{}"))
        attempt = AnthropicRepairAttempt(make_settings(transport_retry_max=0), client=client)

        with pytest.raises(StrategyFailedError, match="AI request failed"):
            await attempt.attempt("doc")
        assert client.messages.create.await_count == 1

    @pytest.mark.asyncio
    async def test_client_error_not_retried(self) -> None:
        """A 4xx status fails immediately."""
        client = _make_client(_status_error(anthropic.BadRequestError, 400))
        attempt = AnthropicRepairAttempt(make_settings(), client=client)

        with pytest.raises(StrategyFailedError, match="AI request failed: 400"):
            await attempt.attempt("doc")
        assert client.messages.create.await_count == 1

    @pytest.mark.asyncio
    async def test_empty_answer_raises(self) -> None:
        """A response with no text is a failure."""
        client = _make_client(_make_response("  "))
        attempt = AnthropicRepairAttempt(make_settings(), client=client)

        with pytest.raises(StrategyFailedError, match="Empty AI response"):
            await attempt.attempt("doc")
