"""Exceptions for the assistant service."""

from __future__ import annotations


class AssistantError(Exception):
    """Base exception for assistant service errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            cause: Optional underlying exception.
        """
        self.cause = cause
        super().__init__(message)


class ChatGenerationError(AssistantError):
    """Raised when the model fails to answer a chat question."""


class QuizGenerationError(AssistantError):
    """Raised when the model fails to produce a usable quiz.

    This covers an unreachable model as well as a reply that cannot be
    parsed or validated into quiz questions.
    """
