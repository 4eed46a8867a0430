"""Integration test fixtures.

Provides a real PostgreSQL via testcontainers and a pool with the favorites
schema applied.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from testcontainers.postgres import PostgresContainer

from recifind.core.config import Settings
from recifind.database.connection import close_database_pool, create_database_pool
from recifind.database.schema import FAVORITES_TABLE


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

    from asyncpg import Pool


pytestmark = pytest.mark.integration


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer]:
    """Start a PostgreSQL container for the test session."""
    with PostgresContainer("postgres:16-alpine") as postgres:
        yield postgres


@pytest.fixture(scope="session")
def database_url(postgres_container: PostgresContainer) -> str:
    """Plain ``postgresql://`` URL for asyncpg."""
    return postgres_container.get_connection_url(driver=None)


@pytest.fixture
def db_settings(database_url: str) -> Settings:
    """Settings pointing at the container with schema bootstrap enabled."""
    return Settings(
        APP_ENV="test",
        DATABASE_URL=database_url,
        GOOGLE_GENERATIVE_AI_API_KEY="test-gemini-key",
        database={"create_schema": True, "ssl": False, "max_pool_size": 5},
        rate_limiting={"enabled": False},
        observability={"metrics": {"enabled": False}},
    )


@pytest.fixture
async def db_pool(db_settings: Settings) -> AsyncGenerator[Pool]:
    """A pool over an empty favorites table."""
    pool = await create_database_pool(db_settings)
    try:
        async with pool.acquire() as conn:
            await conn.execute(f"TRUNCATE {FAVORITES_TABLE} RESTART IDENTITY")
        yield pool
    finally:
        await close_database_pool(pool)
