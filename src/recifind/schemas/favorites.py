"""Favorite recipe request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from recifind.database.schema import MAX_POSTGRES_INT
from recifind.schemas.base import APIRequest, APIResponse


class AddFavoriteRequest(APIRequest):
    """Body of ``POST /favorites``.

    ``userId``, ``recipeId`` and ``title`` are required and must be
    non-empty; a zero ``recipeId`` is rejected like a missing one. Numbers
    must fit the INTEGER columns they are stored in.
    """

    user_id: str = Field(..., min_length=1, description="Opaque user identifier")
    recipe_id: int = Field(
        ..., ge=1, le=MAX_POSTGRES_INT, description="Recipe identifier"
    )
    title: str = Field(..., min_length=1, description="Recipe title")
    image: str | None = Field(default=None, description="Recipe image URL")
    cook_time: str | None = Field(default=None, description="Display cook time")
    servings: int | None = Field(
        default=None, ge=0, le=MAX_POSTGRES_INT, description="Servings count"
    )


class FavoriteResponse(APIResponse):
    """A stored favorite as returned to clients."""

    id: int
    user_id: str
    recipe_id: int
    title: str
    image: str | None = None
    cook_time: str | None = None
    servings: int | None = None
    created_at: datetime


class RemoveFavoriteResponse(APIResponse):
    """Acknowledgement returned by ``DELETE /favorites/{userId}/{recipeId}``."""

    message: str = "Favorite removed successfully"
