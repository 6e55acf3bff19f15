"""Tests for LLMClient (Claude API wrapper)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import anthropic
import httpx
import pytest

from resume_builder.clients.llm_client import LLMClient, LLMResponse, translate_api_error
from resume_builder.errors import (
    AuthenticationFailed,
    NetworkOrUnknown,
    RateLimited,
    UpstreamServiceError,
)

_REQUEST = httpx.Request("POST", "https://api.anthropic.com/v1/messages")


def _make_api_message(text: str, input_tokens: int = 100, output_tokens: int = 50) -> MagicMock:
    """Build a mock anthropic Message-like object."""
    message = MagicMock()
    message.usage.input_tokens = input_tokens
    message.usage.output_tokens = output_tokens
    message.content = [MagicMock(type="text", text=text)]
    return message


def _status_error(cls, status: int):
    return cls(
        message=f"HTTP {status}",
        response=httpx.Response(status, request=_REQUEST),
        body=None,
    )


class TestLLMClientInit:
    def test_init_disables_sdk_retries(self):
        with patch("resume_builder.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient()
            mock_cls.assert_called_once_with(max_retries=0)

    def test_init_with_api_key_and_timeout(self):
        with patch("resume_builder.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            LLMClient(api_key="test-key", timeout=30.0)
            mock_cls.assert_called_once_with(max_retries=0, api_key="test-key", timeout=30.0)


class TestLLMClientGenerate:
    async def test_generate_returns_llm_response(self):
        with patch("resume_builder.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(
                return_value=_make_api_message("hello world", input_tokens=100, output_tokens=50)
            )
            mock_cls.return_value = mock_client

            llm = LLMClient()
            result = await llm.generate("say hello", system="be nice", temperature=0.7, max_tokens=512)

        assert isinstance(result, LLMResponse)
        assert result.text == "hello world"
        assert result.total_tokens == 150
        kwargs = mock_client.messages.create.call_args.kwargs
        assert kwargs["system"] == "be nice"
        assert kwargs["temperature"] == 0.7
        assert kwargs["max_tokens"] == 512
        assert kwargs["messages"] == [{"role": "user", "content": "say hello"}]

    async def test_generate_omits_empty_system(self):
        with patch("resume_builder.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(return_value=_make_api_message("x"))
            mock_cls.return_value = mock_client

            await LLMClient().generate("prompt")

        assert "system" not in mock_client.messages.create.call_args.kwargs

    async def test_generate_translates_rate_limit(self):
        with patch("resume_builder.clients.llm_client.anthropic.AsyncAnthropic") as mock_cls:
            mock_client = MagicMock()
            mock_client.messages.create = AsyncMock(
                side_effect=_status_error(anthropic.RateLimitError, 429)
            )
            mock_cls.return_value = mock_client

            with pytest.raises(RateLimited):
                await LLMClient().generate("prompt")

        assert mock_client.messages.create.await_count == 1


class TestTranslateApiError:
    @pytest.mark.parametrize(
        "cls, status, expected",
        [
            (anthropic.AuthenticationError, 401, AuthenticationFailed),
            (anthropic.PermissionDeniedError, 403, AuthenticationFailed),
            (anthropic.RateLimitError, 429, RateLimited),
            (anthropic.InternalServerError, 500, UpstreamServiceError),
            (anthropic.InternalServerError, 503, UpstreamServiceError),
            (anthropic.BadRequestError, 400, NetworkOrUnknown),
        ],
    )
    def test_status_errors(self, cls, status, expected):
        error = translate_api_error(_status_error(cls, status))
        assert isinstance(error, expected)

    def test_connection_error(self):
        error = translate_api_error(anthropic.APIConnectionError(request=_REQUEST))
        assert isinstance(error, NetworkOrUnknown)
        assert error.retryable

    def test_timeout_error(self):
        error = translate_api_error(anthropic.APITimeoutError(request=_REQUEST))
        assert isinstance(error, NetworkOrUnknown)
        assert "timed out" in error.message

    def test_authentication_is_not_retryable(self):
        error = translate_api_error(_status_error(anthropic.AuthenticationError, 401))
        assert error.retryable is False
        assert error.status_code == 401
