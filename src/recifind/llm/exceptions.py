"""LLM client exceptions.

Raised by the Gemini client and caught by the assistant service, which
turns every one of them into a single failure kind for the HTTP layer.
"""

from __future__ import annotations


class LLMError(Exception):
    """Base exception for LLM client errors."""


class LLMUnavailableError(LLMError):
    """Raised when the LLM service cannot be reached."""


class LLMTimeoutError(LLMUnavailableError):
    """Raised when an LLM request times out."""


class LLMResponseError(LLMError):
    """Raised when the LLM returns an error response or no usable candidate.

    Quota exhaustion (HTTP 429) and rejected API keys land here too.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class LLMValidationError(LLMError):
    """Raised when the LLM output does not match the requested structure."""


class LLMConfigurationError(LLMError):
    """Raised when the LLM client is misconfigured (e.g. no API key)."""
