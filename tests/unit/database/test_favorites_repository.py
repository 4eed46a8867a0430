"""Unit tests for FavoritesRepository.

Tests cover:
- Insert returning the stored row
- Listing by user
- Deleting by (user, recipe) and row-count parsing
- Driver error translation
"""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import asyncpg
import pytest

from recifind.database.exceptions import FavoritesRepositoryError
from recifind.database.repositories.favorites import (
    FavoriteData,
    FavoritesRepository,
    NewFavorite,
    _affected_rows,
)


pytestmark = pytest.mark.unit


class TestAdd:
    """Tests for FavoritesRepository.add."""

    async def test_returns_inserted_row(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
        favorite_row: dict[str, Any],
    ) -> None:
        """Should return the row produced by INSERT ... RETURNING."""
        mock_conn.fetchrow.return_value = favorite_row
        repository = FavoritesRepository(mock_pool)

        result = await repository.add(
            NewFavorite(user_id="u1", recipe_id=7, title="Soup")
        )

        assert isinstance(result, FavoriteData)
        assert result.id == 1
        assert result.user_id == "u1"
        assert result.created_at == favorite_row["created_at"]

    async def test_passes_values_in_column_order(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
        favorite_row: dict[str, Any],
    ) -> None:
        """Should bind user, recipe, title, image, cook time, servings."""
        mock_conn.fetchrow.return_value = favorite_row
        repository = FavoritesRepository(mock_pool)

        await repository.add(
            NewFavorite(
                user_id="u1",
                recipe_id=7,
                title="Soup",
                image="https://img.example.com/soup.jpg",
                cook_time="20 minutes",
                servings=4,
            )
        )

        query, *args = mock_conn.fetchrow.call_args.args
        assert "INSERT INTO favorites" in query
        assert "RETURNING" in query
        assert args == [
            "u1",
            7,
            "Soup",
            "https://img.example.com/soup.jpg",
            "20 minutes",
            4,
        ]

    async def test_optional_fields_default_to_none(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
        favorite_row: dict[str, Any],
    ) -> None:
        """Should insert NULL for omitted optional fields."""
        mock_conn.fetchrow.return_value = favorite_row
        repository = FavoritesRepository(mock_pool)

        await repository.add(NewFavorite(user_id="u1", recipe_id=7, title="Soup"))

        _, *args = mock_conn.fetchrow.call_args.args
        assert args[3:] == [None, None, None]

    async def test_wraps_driver_error(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should raise FavoritesRepositoryError on a Postgres error."""
        mock_conn.fetchrow.side_effect = asyncpg.PostgresError("boom")
        repository = FavoritesRepository(mock_pool)

        with pytest.raises(FavoritesRepositoryError) as exc_info:
            await repository.add(NewFavorite(user_id="u1", recipe_id=7, title="Soup"))

        assert exc_info.value.operation == "insert"
        assert isinstance(exc_info.value.cause, asyncpg.PostgresError)

    async def test_wraps_connection_error(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should raise FavoritesRepositoryError when the host is unreachable."""
        mock_conn.fetchrow.side_effect = ConnectionRefusedError()
        repository = FavoritesRepository(mock_pool)

        with pytest.raises(FavoritesRepositoryError):
            await repository.add(NewFavorite(user_id="u1", recipe_id=7, title="Soup"))

    async def test_raises_when_no_row_returned(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should treat a missing RETURNING row as a failure."""
        mock_conn.fetchrow.return_value = None
        repository = FavoritesRepository(mock_pool)

        with pytest.raises(FavoritesRepositoryError):
            await repository.add(NewFavorite(user_id="u1", recipe_id=7, title="Soup"))


class TestListForUser:
    """Tests for FavoritesRepository.list_for_user."""

    async def test_returns_all_rows(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
        favorite_row: dict[str, Any],
    ) -> None:
        """Should convert every row for the user."""
        second = {**favorite_row, "id": 2, "recipe_id": 8, "title": "Stew"}
        mock_conn.fetch.return_value = [favorite_row, second]
        repository = FavoritesRepository(mock_pool)

        result = await repository.list_for_user("u1")

        assert [f.recipe_id for f in result] == [7, 8]
        query, user_id = mock_conn.fetch.call_args.args
        assert "WHERE user_id = $1" in query
        assert user_id == "u1"

    async def test_returns_empty_list(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should return an empty list when the user has no favorites."""
        mock_conn.fetch.return_value = []
        repository = FavoritesRepository(mock_pool)

        assert await repository.list_for_user("nobody") == []

    async def test_wraps_driver_error(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should raise FavoritesRepositoryError on failure."""
        mock_conn.fetch.side_effect = asyncpg.InterfaceError("pool closed")
        repository = FavoritesRepository(mock_pool)

        with pytest.raises(FavoritesRepositoryError) as exc_info:
            await repository.list_for_user("u1")

        assert exc_info.value.operation == "select"


class TestRemove:
    """Tests for FavoritesRepository.remove."""

    async def test_returns_deleted_count(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should report how many rows were deleted."""
        mock_conn.execute.return_value = "DELETE 1"
        repository = FavoritesRepository(mock_pool)

        assert await repository.remove("u1", 7) == 1

        query, user_id, recipe_id = mock_conn.execute.call_args.args
        assert "DELETE FROM favorites" in query
        assert (user_id, recipe_id) == ("u1", 7)

    async def test_zero_rows_is_not_an_error(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should return 0 when nothing matched."""
        mock_conn.execute.return_value = "DELETE 0"
        repository = FavoritesRepository(mock_pool)

        assert await repository.remove("u1", 999) == 0

    async def test_wraps_driver_error(
        self,
        mock_pool: MagicMock,
        mock_conn: AsyncMock,
    ) -> None:
        """Should raise FavoritesRepositoryError on failure."""
        mock_conn.execute.side_effect = TimeoutError()
        repository = FavoritesRepository(mock_pool)

        with pytest.raises(FavoritesRepositoryError) as exc_info:
            await repository.remove("u1", 7)

        assert exc_info.value.operation == "delete"


class TestAffectedRows:
    """Tests for command tag parsing."""

    @pytest.mark.parametrize(
        ("status_line", "expected"),
        [
            ("DELETE 3", 3),
            ("DELETE 0", 0),
            ("", 0),
            (None, 0),
            ("DELETE", 0),
        ],
    )
    def test_parses_status_line(self, status_line: str | None, expected: int) -> None:
        """Should extract the trailing row count."""
        assert _affected_rows(status_line) == expected
