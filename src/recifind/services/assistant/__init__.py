"""Assistant service package.

Provides LLM-backed recipe chat and quiz generation.
"""

from __future__ import annotations

from recifind.services.assistant.exceptions import (
    AssistantError,
    ChatGenerationError,
    QuizGenerationError,
)
from recifind.services.assistant.service import AssistantService


__all__ = [
    "AssistantError",
    "AssistantService",
    "ChatGenerationError",
    "QuizGenerationError",
]
