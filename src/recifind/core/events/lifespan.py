"""Application lifespan event handlers.

Startup builds every collaborator explicitly and stores it on ``app.state``:

- ``db_pool``: asyncpg pool
- ``favorites_repository``: repository over that pool
- ``llm_client``: Gemini HTTP client
- ``assistant_service``: chat and quiz service over the LLM client

Shutdown releases them in reverse order.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recifind.core.config import Settings, get_settings
from recifind.database.connection import close_database_pool, create_database_pool
from recifind.database.repositories.favorites import FavoritesRepository
from recifind.llm.client.gemini import GeminiClient
from recifind.observability.logging import get_logger, setup_logging
from recifind.services.assistant.service import AssistantService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


def _get_app_settings(app: FastAPI) -> Settings:
    settings = getattr(app.state, "settings", None)
    return settings if isinstance(settings, Settings) else get_settings()


async def _init_database(app: FastAPI, settings: Settings) -> None:
    """Open the database pool (critical - raises on failure)."""
    pool = await create_database_pool(settings)
    app.state.db_pool = pool
    app.state.favorites_repository = FavoritesRepository(pool)


async def _init_assistant(app: FastAPI, settings: Settings) -> None:
    """Create the Gemini client and the assistant service on top of it."""
    if not settings.GOOGLE_GENERATIVE_AI_API_KEY:
        logger.warning(
            "GOOGLE_GENERATIVE_AI_API_KEY not set - AI requests will fail"
        )

    gemini = settings.llm.gemini
    llm_client = GeminiClient(
        api_key=settings.GOOGLE_GENERATIVE_AI_API_KEY,
        model=gemini.model,
        base_url=gemini.url,
        timeout=gemini.timeout,
    )
    await llm_client.initialize()
    app.state.llm_client = llm_client
    app.state.assistant_service = AssistantService(llm_client)


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup."""
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    await _init_database(app, settings)
    await _init_assistant(app, settings)

    logger.info("Application startup complete")


async def _shutdown(app: FastAPI) -> None:
    """Shutdown all application services."""
    logger.info("Shutting down application")

    app.state.assistant_service = None
    llm_client: GeminiClient | None = getattr(app.state, "llm_client", None)
    if llm_client is not None:
        await llm_client.shutdown()
        app.state.llm_client = None

    app.state.favorites_repository = None
    await close_database_pool(getattr(app.state, "db_pool", None))
    app.state.db_pool = None

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Uses the settings the app was created with, falling back to
    ``get_settings()``. Whatever startup opened is released even when a
    later startup step fails.
    """
    settings = _get_app_settings(app)
    try:
        await _startup(app, settings)
        yield
    finally:
        await _shutdown(app)
