"""PostgreSQL database layer.

This module provides:
- Connection pool management
- Schema bootstrap for the favorites table
- Repository classes for data access
- Health check utilities
"""

from recifind.database.connection import (
    check_database_health,
    close_database_pool,
    create_database_pool,
)
from recifind.database.exceptions import DatabaseError, FavoritesRepositoryError
from recifind.database.repositories.favorites import (
    FavoriteData,
    FavoritesRepository,
    NewFavorite,
)


__all__ = [
    "DatabaseError",
    "FavoriteData",
    "FavoritesRepository",
    "FavoritesRepositoryError",
    "NewFavorite",
    "check_database_health",
    "close_database_pool",
    "create_database_pool",
]
