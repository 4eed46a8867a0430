"""API test fixtures.

The app is built with ``create_app`` but its lifespan is not run; the
collaborators it would create are placed on ``app.state`` as mocks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from recifind.database.repositories.favorites import FavoritesRepository
from recifind.factory import create_app
from recifind.services.assistant.service import AssistantService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recifind.core.config import Settings


@pytest.fixture
def mock_repository() -> MagicMock:
    """A mock favorites repository."""
    repository = MagicMock(spec=FavoritesRepository)
    repository.add = AsyncMock()
    repository.list_for_user = AsyncMock(return_value=[])
    repository.remove = AsyncMock(return_value=0)
    return repository


@pytest.fixture
def mock_assistant() -> MagicMock:
    """A mock assistant service."""
    service = MagicMock(spec=AssistantService)
    service.chat = AsyncMock()
    service.generate_quiz = AsyncMock()
    return service


@pytest.fixture
def app(
    test_settings: Settings,
    mock_repository: MagicMock,
    mock_assistant: MagicMock,
) -> FastAPI:
    """Application wired to mock collaborators."""
    application = create_app(test_settings)
    application.state.favorites_repository = mock_repository
    application.state.assistant_service = mock_assistant
    application.state.db_pool = None
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the application."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
