"""Database repositories."""

from recifind.database.repositories.favorites import (
    FavoriteData,
    FavoritesRepository,
    NewFavorite,
)


__all__ = ["FavoriteData", "FavoritesRepository", "NewFavorite"]
