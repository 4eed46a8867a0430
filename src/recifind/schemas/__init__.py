"""Pydantic schemas for request/response validation."""

from recifind.schemas.ai import (
    ChatRequest,
    ChatResponse,
    QuizQuestion,
    QuizRequest,
    QuizResponse,
)
from recifind.schemas.base import APIRequest, APIResponse, DownstreamResponse
from recifind.schemas.favorites import (
    AddFavoriteRequest,
    FavoriteResponse,
    RemoveFavoriteResponse,
)
from recifind.schemas.health import HealthResponse, ReadinessResponse


__all__ = [
    "APIRequest",
    "APIResponse",
    "AddFavoriteRequest",
    "ChatRequest",
    "ChatResponse",
    "DownstreamResponse",
    "FavoriteResponse",
    "HealthResponse",
    "QuizQuestion",
    "QuizRequest",
    "QuizResponse",
    "ReadinessResponse",
    "RemoveFavoriteResponse",
]
