"""LLM client data models.

Request/response bodies for the Gemini ``generateContent`` REST endpoint and
the provider-neutral completion result handed back to callers.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _GeminiModel(BaseModel):
    """Gemini speaks camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


# =============================================================================
# Gemini API Models
# =============================================================================


class GeminiPart(_GeminiModel):
    """A single content part; only text parts are used."""

    text: str | None = None


class GeminiContent(_GeminiModel):
    """A turn of conversation content."""

    role: str | None = Field(default=None, description="'user' or 'model'")
    parts: list[GeminiPart] = Field(default_factory=list)


class GeminiGenerationConfig(_GeminiModel):
    """Sampling and output-format options."""

    temperature: float | None = None
    max_output_tokens: int | None = None
    response_mime_type: str | None = Field(
        default=None,
        description="'application/json' to request JSON output",
    )
    response_schema: dict[str, Any] | None = Field(
        default=None,
        description="OpenAPI-subset schema constraining JSON output",
    )


class GeminiGenerateRequest(_GeminiModel):
    """Request body for ``models/{model}:generateContent``."""

    contents: list[GeminiContent]
    system_instruction: GeminiContent | None = None
    generation_config: GeminiGenerationConfig | None = None


class GeminiCandidate(_GeminiModel):
    """One generated candidate."""

    content: GeminiContent | None = None
    finish_reason: str | None = None


class GeminiUsageMetadata(_GeminiModel):
    """Token accounting."""

    prompt_token_count: int | None = None
    candidates_token_count: int | None = None
    total_token_count: int | None = None


class GeminiPromptFeedback(_GeminiModel):
    """Present when the prompt itself was blocked."""

    block_reason: str | None = None


class GeminiGenerateResponse(_GeminiModel):
    """Response from ``models/{model}:generateContent``."""

    candidates: list[GeminiCandidate] = Field(default_factory=list)
    usage_metadata: GeminiUsageMetadata | None = None
    prompt_feedback: GeminiPromptFeedback | None = None
    model_version: str | None = None

    @property
    def text(self) -> str:
        """Concatenated text of the first candidate, or empty string."""
        if not self.candidates or self.candidates[0].content is None:
            return ""
        return "".join(
            part.text for part in self.candidates[0].content.parts if part.text
        )


# =============================================================================
# Provider-neutral result
# =============================================================================


class LLMCompletionResult(BaseModel):
    """Internal result from LLM completion.

    Wraps raw response with parsed structured output.
    """

    raw_response: str = Field(..., description="Raw text response from LLM")
    parsed: Any | None = Field(
        default=None,
        description="Parsed structured output if schema was provided",
    )
    model: str = Field(..., description="Model that generated response")
    prompt_tokens: int | None = Field(default=None, description="Input token count")
    completion_tokens: int | None = Field(
        default=None, description="Output token count"
    )

    model_config = {"frozen": True}
