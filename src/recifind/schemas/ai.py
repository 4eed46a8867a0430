"""AI assistant request/response schemas."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from recifind.schemas.base import APIRequest, APIResponse, DownstreamResponse


class ChatRequest(APIRequest):
    """Body of ``POST /ai/chat``."""

    user_message: str = Field(
        ...,
        min_length=1,
        description="The user's question about the recipe",
    )
    recipe_context: dict[str, Any] = Field(
        default_factory=dict,
        description="Arbitrary recipe details forwarded to the model verbatim",
    )


class ChatResponse(APIResponse):
    """Generated answer text."""

    response: str


class QuizRequest(APIRequest):
    """Body of ``POST /ai/quiz``."""

    recipe_context: dict[str, Any] = Field(
        ...,
        description="Arbitrary recipe details the quiz is generated from",
    )


class QuizQuestion(DownstreamResponse):
    """One multiple-choice question as produced by the model."""

    question: str
    options: list[str]
    correct_answer: str
    explanation: str


class QuizResponse(APIResponse):
    """Generated quiz."""

    quiz: list[QuizQuestion]
