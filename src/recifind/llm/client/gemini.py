"""HTTP client for the Gemini generative language API.

Talks to the ``models/{model}:generateContent`` REST endpoint with httpx.
Each call is a single attempt: failures are classified and raised, never
retried.
"""

from __future__ import annotations

from typing import Any, TypeVar, cast

import httpx
from pydantic import BaseModel, ValidationError

from recifind.llm.exceptions import (
    LLMConfigurationError,
    LLMResponseError,
    LLMTimeoutError,
    LLMUnavailableError,
    LLMValidationError,
)
from recifind.llm.models import (
    GeminiContent,
    GeminiGenerateRequest,
    GeminiGenerateResponse,
    GeminiGenerationConfig,
    GeminiPart,
    LLMCompletionResult,
)
from recifind.observability.logging import get_logger


logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)

JSON_MIME_TYPE = "application/json"


class GeminiClient:
    """Async HTTP client for the Gemini API.

    Supports JSON mode via ``responseMimeType`` and an optional
    ``responseSchema`` constraining the shape of the output.

    Attributes:
        base_url: API base URL (``.../v1beta``).
        model: Default model (e.g. gemini-2.5-flash).
        api_key: API key sent as ``x-goog-api-key``.
        timeout: HTTP request timeout in seconds.
    """

    DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
    ) -> None:
        """Initialize the Gemini client.

        Args:
            api_key: Gemini API key. An empty key is accepted here and
                reported as LLMConfigurationError on first use.
            model: Default model name.
            base_url: API base URL.
            timeout: HTTP request timeout in seconds.
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client: httpx.AsyncClient | None = None

    def generate_url(self, model: str | None = None) -> str:
        """Get the generateContent endpoint URL for ``model``."""
        return f"{self.base_url}/models/{model or self.model}:generateContent"

    async def initialize(self) -> None:
        """Initialize the HTTP client with auth headers."""
        if self._http_client is not None:
            return

        self._http_client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={
                "x-goog-api-key": self.api_key,
                "Content-Type": "application/json",
            },
            limits=httpx.Limits(
                max_keepalive_connections=10,
                max_connections=20,
            ),
        )
        logger.info(
            "GeminiClient initialized",
            model=self.model,
            timeout=self.timeout,
        )

    async def shutdown(self) -> None:
        """Close the HTTP client and release connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            logger.debug("GeminiClient shutdown")

    async def _execute(
        self,
        url: str,
        request: GeminiGenerateRequest,
    ) -> GeminiGenerateResponse:
        """Send one request and classify any failure."""
        if not self.api_key:
            msg = "Gemini API key is not configured"
            raise LLMConfigurationError(msg)

        if self._http_client is None:
            await self.initialize()
        assert self._http_client is not None

        try:
            response = await self._http_client.post(
                url,
                json=request.model_dump(by_alias=True, exclude_none=True),
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.warning("Gemini request timeout", timeout=self.timeout)
            msg = f"Gemini timeout after {self.timeout}s"
            raise LLMTimeoutError(msg) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                "Gemini request failed",
                status_code=status_code,
                body=e.response.text[:500],
            )
            msg = f"Gemini returned {status_code}"
            raise LLMResponseError(msg, status_code=status_code) from e
        except httpx.RequestError as e:
            logger.warning("Gemini connection error", error=str(e))
            msg = f"Cannot connect to Gemini: {e}"
            raise LLMUnavailableError(msg) from e

        try:
            return GeminiGenerateResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            msg = "Gemini returned a malformed response body"
            raise LLMResponseError(msg, status_code=response.status_code) from e

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
        """Generate a completion from Gemini.

        Args:
            prompt: Input prompt text.
            model: Model to use (defaults to client's default model).
            system: Optional system instruction.
            schema: Optional Pydantic model; switches on JSON output and
                parses the reply into it.
            response_schema: Optional Gemini ``responseSchema``.
            options: ``temperature`` and/or ``max_tokens``.

        Returns:
            LLMCompletionResult with raw response and optionally parsed output.

        Raises:
            LLMConfigurationError: If no API key is configured.
            LLMUnavailableError: If Gemini cannot be reached.
            LLMTimeoutError: If request times out.
            LLMResponseError: If Gemini returns an error or no text.
            LLMValidationError: If response doesn't match schema.
        """
        use_model = model or self.model
        options = options or {}

        structured = schema is not None or response_schema is not None
        generation_config = GeminiGenerationConfig(
            temperature=options.get("temperature"),
            max_output_tokens=options.get("max_tokens"),
            response_mime_type=JSON_MIME_TYPE if structured else None,
            response_schema=response_schema,
        )

        request = GeminiGenerateRequest(
            contents=[GeminiContent(role="user", parts=[GeminiPart(text=prompt)])],
            system_instruction=(
                GeminiContent(parts=[GeminiPart(text=system)]) if system else None
            ),
            generation_config=generation_config,
        )

        response = await self._execute(self.generate_url(use_model), request)

        raw_response = response.text
        if not raw_response:
            block_reason = (
                response.prompt_feedback.block_reason
                if response.prompt_feedback
                else None
            )
            finish_reason = (
                response.candidates[0].finish_reason if response.candidates else None
            )
            logger.warning(
                "Gemini returned no text",
                block_reason=block_reason,
                finish_reason=finish_reason,
            )
            msg = "Gemini returned an empty response"
            raise LLMResponseError(msg)

        parsed: Any = None
        if schema is not None:
            try:
                parsed = schema.model_validate_json(raw_response)
            except ValidationError as e:
                logger.warning(
                    "Failed to parse structured Gemini output",
                    schema=schema.__name__,
                    error_count=e.error_count(),
                    raw_response=raw_response[:500],
                )
                msg = f"Response does not match {schema.__name__} schema"
                raise LLMValidationError(msg) from e

        usage = response.usage_metadata
        return LLMCompletionResult(
            raw_response=raw_response,
            parsed=parsed,
            model=response.model_version or use_model,
            prompt_tokens=usage.prompt_token_count if usage else None,
            completion_tokens=usage.candidates_token_count if usage else None,
        )

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
        """Generate output parsed into ``schema``.

        Raises:
            LLMValidationError: If response doesn't match schema.
        """
        result = await self.generate(
            prompt=prompt,
            model=model,
            system=system,
            schema=schema,
            response_schema=response_schema,
            options=options,
        )

        if result.parsed is None:
            msg = "Structured generation returned no parsed result"
            raise LLMValidationError(msg)

        return cast("T", result.parsed)
