"""Base class for LLM prompts.

Provides a standardized interface for defining prompts with:
- Typed input variables
- Optional structured output schemas
- Generation options
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BasePrompt(ABC, Generic[T]):
    """Base class for all LLM prompts.

    Example:
        ```python
        class RecipeSummaryPrompt(BasePrompt[RecipeSummary]):
            output_schema = RecipeSummary
            system_prompt = "You summarize recipes."

            def format(self, recipe: dict) -> str:
                return f"Summarize:\\n\\n{recipe}"
        ```
    """

    # Override in subclasses
    output_schema: ClassVar[type[BaseModel] | None] = None
    """Pydantic model for structured output validation (None = free text)."""

    response_schema: ClassVar[dict[str, Any] | None] = None
    """Provider-side schema sent with the request to constrain JSON output."""

    system_prompt: ClassVar[str | None] = None
    """Optional system instruction to set context for the LLM."""

    temperature: ClassVar[float | None] = None
    """Temperature for generation (None = model default)."""

    max_tokens: ClassVar[int | None] = None
    """Maximum tokens to generate (None = model default)."""

    @abstractmethod
    def format(self, **kwargs: Any) -> str:
        """Format the prompt template with input variables.

        Raises:
            ValueError: If required variables are missing.
        """
        ...

    @property
    def name(self) -> str:
        """Prompt identifier for logging."""
        return self.__class__.__name__

    def get_options(self) -> dict[str, Any]:
        """Get model options for this prompt."""
        options: dict[str, Any] = {}
        if self.temperature is not None:
            options["temperature"] = self.temperature
        if self.max_tokens is not None:
            options["max_tokens"] = self.max_tokens
        return options
