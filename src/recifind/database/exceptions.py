"""Persistence layer exceptions.

Repositories translate driver errors into these so the endpoint layer
does not depend on asyncpg.
"""

from __future__ import annotations


class DatabaseError(Exception):
    """Base exception for persistence failures."""


class FavoritesRepositoryError(DatabaseError):
    """Raised when a statement against the favorites table fails."""

    def __init__(self, operation: str, cause: Exception | None = None) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Favorites {operation} failed")
