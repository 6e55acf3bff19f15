"""Typed failures surfaced by content generation.

Every error carries ``retryable`` (whether resubmitting the same request may
succeed) and ``status_code`` (the HTTP status the API answers with).
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for content generation failures."""

    kind = "GenerationError"
    retryable = True
    status_code = 500
    default_message = "Resume generation failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class MissingCredentials(GenerationError):
    kind = "MissingCredentials"
    retryable = False
    default_message = (
        "Text-generation API key is not configured. "
        "Set the ANTHROPIC_API_KEY environment variable."
    )


class AuthenticationFailed(GenerationError):
    kind = "AuthenticationFailed"
    retryable = False
    status_code = 401
    default_message = "Text-generation API key was rejected. Check ANTHROPIC_API_KEY."


class RateLimited(GenerationError):
    kind = "RateLimited"
    status_code = 429
    default_message = "Text-generation rate limit exceeded. Try again in a few seconds."


class MalformedResponse(GenerationError):
    kind = "MalformedResponse"
    default_message = "Generated content could not be parsed. Try again."


class UpstreamServiceError(GenerationError):
    kind = "UpstreamServiceError"
    default_message = "Text-generation service is unavailable. Try again later."


class NetworkOrUnknown(GenerationError):
    kind = "NetworkOrUnknown"
    default_message = "Could not reach the text-generation service."
