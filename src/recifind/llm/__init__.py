"""LLM integration module.

Provides a client for the Gemini generative language API and the prompt
templates used for recipe chat and quiz generation.
"""

from recifind.llm.client.gemini import GeminiClient
from recifind.llm.exceptions import (
    LLMConfigurationError,
    LLMError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from recifind.llm.models import LLMCompletionResult
from recifind.llm.prompts.base import BasePrompt


__all__ = [
    "BasePrompt",
    "GeminiClient",
    "LLMCompletionResult",
    "LLMConfigurationError",
    "LLMError",
    "LLMResponseError",
    "LLMTimeoutError",
    "LLMUnavailableError",
    "LLMValidationError",
]
