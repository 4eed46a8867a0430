"""Favorite recipe endpoints.

Provides:
- POST /favorites to store a favorite
- GET /favorites/{userId} to list a user's favorites
- DELETE /favorites/{userId}/{recipeId} to remove a favorite
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from recifind.api.dependencies import get_favorites_repository
from recifind.core.exceptions import InternalServerException
from recifind.database.exceptions import FavoritesRepositoryError
from recifind.database.repositories.favorites import (  # noqa: TC001
    FavoriteData,
    FavoritesRepository,
    NewFavorite,
)
from recifind.database.schema import MAX_POSTGRES_INT
from recifind.observability.logging import get_logger
from recifind.schemas.favorites import (
    AddFavoriteRequest,
    FavoriteResponse,
    RemoveFavoriteResponse,
)


logger = get_logger(__name__)

router = APIRouter(tags=["Favorites"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    500: {
        "description": "Database failure",
        "content": {
            "application/json": {
                "example": {
                    "error": "INTERNAL_SERVER_ERROR",
                    "message": "Something went wrong",
                }
            }
        },
    },
}


def _to_response(favorite: FavoriteData) -> FavoriteResponse:
    return FavoriteResponse(**favorite.model_dump())


def _parse_recipe_id(raw: str) -> int | None:
    """Parse a path segment into a storable recipe id.

    Returns None when the value cannot match any stored row.
    """
    try:
        recipe_id = int(raw)
    except ValueError:
        return None
    if not 1 <= recipe_id <= MAX_POSTGRES_INT:
        return None
    return recipe_id


@router.post(
    "/favorites",
    response_model=FavoriteResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a recipe to a user's favorites",
    responses={
        400: {
            "description": "A required field is missing",
            "content": {
                "application/json": {
                    "example": {
                        "error": "BAD_REQUEST",
                        "message": "Missing required fields",
                    }
                }
            },
        },
        **_ERROR_RESPONSES,
    },
)
async def add_favorite(
    body: AddFavoriteRequest,
    repository: Annotated[FavoritesRepository, Depends(get_favorites_repository)],
) -> FavoriteResponse:
    """Store a favorite and return the inserted row."""
    new_favorite = NewFavorite(**body.model_dump(by_alias=False))
    try:
        favorite = await repository.add(new_favorite)
    except FavoritesRepositoryError as e:
        logger.opt(exception=e).error("Error adding favorite", user_id=body.user_id)
        raise InternalServerException() from e

    return _to_response(favorite)


@router.get(
    "/favorites/{user_id}",
    response_model=list[FavoriteResponse],
    summary="List a user's favorite recipes",
    responses=_ERROR_RESPONSES,
)
async def list_favorites(
    user_id: str,
    repository: Annotated[FavoritesRepository, Depends(get_favorites_repository)],
) -> list[FavoriteResponse]:
    """Return every favorite stored for ``user_id``; empty when none exist."""
    try:
        favorites = await repository.list_for_user(user_id)
    except FavoritesRepositoryError as e:
        logger.opt(exception=e).error("Error fetching favorites", user_id=user_id)
        raise InternalServerException() from e

    return [_to_response(favorite) for favorite in favorites]


@router.delete(
    "/favorites/{user_id}/{recipe_id}",
    response_model=RemoveFavoriteResponse,
    summary="Remove a recipe from a user's favorites",
    description=(
        "Deletes every favorite matching the user and recipe. Succeeds even "
        "when nothing matched, including when the recipe id is not a number."
    ),
    responses=_ERROR_RESPONSES,
)
async def remove_favorite(
    user_id: str,
    recipe_id: str,
    repository: Annotated[FavoritesRepository, Depends(get_favorites_repository)],
) -> RemoveFavoriteResponse:
    """Delete the favorite for ``(user_id, recipe_id)``."""
    parsed_id = _parse_recipe_id(recipe_id)
    if parsed_id is None:
        logger.debug(
            "Recipe id matches no favorite",
            user_id=user_id,
            recipe_id=recipe_id,
        )
        return RemoveFavoriteResponse()

    try:
        await repository.remove(user_id, parsed_id)
    except FavoritesRepositoryError as e:
        logger.opt(exception=e).error(
            "Error removing favorite",
            user_id=user_id,
            recipe_id=parsed_id,
        )
        raise InternalServerException() from e

    return RemoveFavoriteResponse()
