"""FastAPI dependencies for service access.

Collaborators are constructed during application startup and stored in
``app.state``; these dependencies hand them to route handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status


if TYPE_CHECKING:
    from asyncpg import Pool

    from recifind.database.repositories.favorites import FavoritesRepository
    from recifind.services.assistant.service import AssistantService


async def get_favorites_repository(request: Request) -> FavoritesRepository:
    """Get the favorites repository from app state.

    Raises:
        HTTPException: 503 if the database is not initialized.
    """
    repository: FavoritesRepository | None = getattr(
        request.app.state, "favorites_repository", None
    )
    if repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Favorites storage not available",
        )
    return repository


async def get_assistant_service(request: Request) -> AssistantService:
    """Get the assistant service from app state.

    Raises:
        HTTPException: 503 if the service is not initialized.
    """
    service: AssistantService | None = getattr(
        request.app.state, "assistant_service", None
    )
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="AI assistant not available",
        )
    return service


async def get_db_pool(request: Request) -> Pool | None:
    """Get the database pool from app state, if one was opened."""
    return getattr(request.app.state, "db_pool", None)
