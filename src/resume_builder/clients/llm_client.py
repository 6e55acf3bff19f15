"""Claude API wrapper that translates SDK failures into typed errors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

import anthropic

from resume_builder.errors import (
    AuthenticationFailed,
    GenerationError,
    NetworkOrUnknown,
    RateLimited,
    UpstreamServiceError,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"


@dataclass
class LLMResponse:
    """Response from the LLM including usage metadata."""

    text: str
    input_tokens: int
    output_tokens: int

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class TextGenerator(Protocol):
    """Anything that turns a prompt into text. Failures are GenerationErrors."""

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> LLMResponse: ...


class LLMClient:
    """Async Claude API client. One request per call, no automatic retries."""

    def __init__(self, api_key: str | None = None, timeout: float | None = None):
        kwargs: dict = {"max_retries": 0}
        if api_key is not None:
            kwargs["api_key"] = api_key
        if timeout is not None:
            kwargs["timeout"] = timeout
        self.client = anthropic.AsyncAnthropic(**kwargs)

    async def generate(
        self,
        prompt: str,
        system: str = "",
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> LLMResponse:
        """Send a prompt to Claude and return the text response with usage."""
        kwargs: dict = {
            "model": model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        logger.debug("LLM call: model=%s", model)
        try:
            message = await self.client.messages.create(**kwargs)
        except anthropic.APIError as exc:
            logger.error("LLM call failed: %s", exc)
            raise translate_api_error(exc) from exc

        input_tokens = message.usage.input_tokens
        output_tokens = message.usage.output_tokens
        logger.debug("LLM response: %d input, %d output tokens", input_tokens, output_tokens)
        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        )
        return LLMResponse(text=text, input_tokens=input_tokens, output_tokens=output_tokens)


def translate_api_error(exc: anthropic.APIError) -> GenerationError:
    """Map an anthropic SDK exception onto the generation failure taxonomy."""
    if isinstance(exc, anthropic.APIStatusError):
        status = exc.status_code
        if status in (401, 403):
            return AuthenticationFailed()
        if status == 429:
            return RateLimited()
        if status >= 500:
            return UpstreamServiceError(
                f"Text-generation service returned HTTP {status}. Try again later."
            )
        return NetworkOrUnknown(f"Text-generation request failed with HTTP {status}: {exc.message}")
    if isinstance(exc, anthropic.APITimeoutError):
        return NetworkOrUnknown("Text-generation request timed out.")
    if isinstance(exc, anthropic.APIConnectionError):
        return NetworkOrUnknown()
    return NetworkOrUnknown(f"Text-generation request failed: {exc}")
