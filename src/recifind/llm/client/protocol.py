"""LLM Client Protocol definition.

Defines the interface the assistant service depends on, so tests and
alternative providers can stand in for the Gemini client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel


if TYPE_CHECKING:
    from recifind.llm.models import LLMCompletionResult


T = TypeVar("T", bound=BaseModel)


@runtime_checkable
class LLMClientProtocol(Protocol):
    """Protocol for LLM client implementations.

    Key methods:
    - generate: Text generation with optional structured output
    - generate_structured: Convenience method returning parsed Pydantic model
    - initialize/shutdown: Lifecycle management for the HTTP connection pool
    """

    async def initialize(self) -> None:
        """Initialize client resources (HTTP connections, etc.)."""
        ...

    async def shutdown(self) -> None:
        """Release client resources."""
        ...

    async def generate(
        self,
        prompt: str,
        *,
        model: str | None = None,
        system: str | None = None,
        schema: type[T] | None = None,
        response_schema: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> LLMCompletionResult:
        """Generate text completion from the LLM.

        Args:
            prompt: Input prompt text.
            model: Model override (uses client default if None).
            system: Optional system instruction.
            schema: Optional Pydantic model the JSON output is parsed into.
            response_schema: Optional provider-side schema constraining output.
            options: Model-specific options (temperature, max_tokens).

        Returns:
            LLMCompletionResult with raw_response and optionally parsed output.

        Raises:
            LLMUnavailableError: Service unreachable.
            LLMTimeoutError: Request timed out.
            LLMResponseError: HTTP error or empty reply from service.
            LLMValidationError: Response doesn't match schema.
            LLMConfigurationError: Client cannot issue requests.
        """
        ...

    async def generate_structured(
        self,
        prompt: str,
        schema: type[T],
        *,
        model: str | None = None,
        system: str | None = None,
        response_schema: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> T:
        """Generate structured output matching a Pydantic schema.

        Raises:
            LLMValidationError: If response doesn't match schema.
        """
        ...
