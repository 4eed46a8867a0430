"""Favorites data repository.

Raw asyncpg statements against the ``favorites`` table. Each operation is a
single statement; nothing is retried and no rows are cached.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Final

import asyncpg
from pydantic import BaseModel

from recifind.database.exceptions import FavoritesRepositoryError
from recifind.database.schema import FAVORITES_TABLE
from recifind.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool, Record

logger = get_logger(__name__)

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, TimeoutError)


# =============================================================================
# Data Transfer Objects
# =============================================================================


class NewFavorite(BaseModel):
    """Values for a row about to be inserted."""

    user_id: str
    recipe_id: int
    title: str
    image: str | None = None
    cook_time: str | None = None
    servings: int | None = None


class FavoriteData(NewFavorite):
    """A stored favorites row."""

    id: int
    created_at: datetime


# =============================================================================
# Repository
# =============================================================================

_COLUMNS: Final[str] = (
    "id, user_id, recipe_id, title, image, cook_time, servings, created_at"
)

_INSERT_QUERY: Final[str] = f"""
    INSERT INTO {FAVORITES_TABLE} (user_id, recipe_id, title, image, cook_time, servings)
    VALUES ($1, $2, $3, $4, $5, $6)
    RETURNING {_COLUMNS}
"""

_SELECT_BY_USER_QUERY: Final[str] = f"""
    SELECT {_COLUMNS}
    FROM {FAVORITES_TABLE}
    WHERE user_id = $1
"""

_DELETE_QUERY: Final[str] = f"""
    DELETE FROM {FAVORITES_TABLE}
    WHERE user_id = $1 AND recipe_id = $2
"""


class FavoritesRepository:
    """Repository for a user's favorited recipes.

    Every driver error is re-raised as ``FavoritesRepositoryError``.
    """

    def __init__(self, pool: Pool) -> None:
        """Initialize repository with a connection pool.

        Args:
            pool: asyncpg connection pool owned by the application lifespan.
        """
        self._pool = pool

    async def add(self, favorite: NewFavorite) -> FavoriteData:
        """Insert one favorite and return the stored row.

        Args:
            favorite: Validated values to insert.

        Returns:
            The inserted row including its generated id and timestamp.

        Raises:
            FavoritesRepositoryError: If the insert fails.
        """
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    _INSERT_QUERY,
                    favorite.user_id,
                    favorite.recipe_id,
                    favorite.title,
                    favorite.image,
                    favorite.cook_time,
                    favorite.servings,
                )
        except _DRIVER_ERRORS as e:
            raise FavoritesRepositoryError("insert", e) from e

        if row is None:
            raise FavoritesRepositoryError("insert")

        logger.debug(
            "Favorite inserted",
            favorite_id=row["id"],
            user_id=favorite.user_id,
            recipe_id=favorite.recipe_id,
        )
        return self._row_to_favorite(row)

    async def list_for_user(self, user_id: str) -> list[FavoriteData]:
        """Return every favorite belonging to ``user_id``, in no set order.

        Raises:
            FavoritesRepositoryError: If the query fails.
        """
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(_SELECT_BY_USER_QUERY, user_id)
        except _DRIVER_ERRORS as e:
            raise FavoritesRepositoryError("select", e) from e

        return [self._row_to_favorite(row) for row in rows]

    async def remove(self, user_id: str, recipe_id: int) -> int:
        """Delete every favorite matching ``(user_id, recipe_id)``.

        Returns:
            Number of rows deleted; zero is not an error.

        Raises:
            FavoritesRepositoryError: If the delete fails.
        """
        try:
            async with self._pool.acquire() as conn:
                status_line = await conn.execute(_DELETE_QUERY, user_id, recipe_id)
        except _DRIVER_ERRORS as e:
            raise FavoritesRepositoryError("delete", e) from e

        deleted = _affected_rows(status_line)
        logger.debug(
            "Favorites deleted",
            user_id=user_id,
            recipe_id=recipe_id,
            deleted=deleted,
        )
        return deleted

    @staticmethod
    def _row_to_favorite(row: Record) -> FavoriteData:
        """Convert database row to FavoriteData DTO."""
        return FavoriteData(
            id=row["id"],
            user_id=row["user_id"],
            recipe_id=row["recipe_id"],
            title=row["title"],
            image=row["image"],
            cook_time=row["cook_time"],
            servings=row["servings"],
            created_at=row["created_at"],
        )


def _affected_rows(status_line: str | None) -> int:
    """Parse the row count from a command tag such as ``DELETE 3``."""
    if not status_line:
        return 0
    try:
        return int(status_line.rsplit(" ", 1)[-1])
    except ValueError:
        return 0
