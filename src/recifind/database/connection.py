"""PostgreSQL connection pool management.

The pool is created by the application lifespan and handed to whoever needs
it; nothing in this module holds a global pool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import asyncpg

from recifind.database.schema import ensure_schema
from recifind.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Pool

    from recifind.core.config import Settings

logger = get_logger(__name__)


async def create_database_pool(settings: Settings) -> Pool:
    """Open the asyncpg pool and verify it with ``SELECT 1``.

    Creates the ``favorites`` table first when ``database.create_schema`` is
    enabled.

    Args:
        settings: Application settings.

    Returns:
        The connected pool.

    Raises:
        asyncpg.PostgresError: If the database rejects the connection.
        OSError: If the database host cannot be reached.
    """
    logger.info(
        "Initializing database connection pool",
        host=settings.database.host if not settings.DATABASE_URL else "<url>",
        min_size=settings.database.min_pool_size,
        max_size=settings.database.max_pool_size,
    )

    pool: Pool = await asyncpg.create_pool(
        dsn=settings.database_url,
        min_size=settings.database.min_pool_size,
        max_size=settings.database.max_pool_size,
        command_timeout=settings.database.command_timeout,
        ssl="require" if settings.database.ssl else None,
    )

    try:
        async with pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
            if settings.database.create_schema:
                await ensure_schema(conn)
    except (asyncpg.PostgresError, OSError):
        logger.exception("Failed to connect to database")
        await pool.close()
        raise

    logger.info("Database connection established successfully")
    return pool


async def close_database_pool(pool: Pool | None) -> None:
    """Close the pool if one was opened."""
    if pool is None:
        return
    logger.info("Closing database connection pool")
    await pool.close()
    logger.info("Database connection pool closed")


async def check_database_health(pool: Pool | None) -> dict[str, str]:
    """Report whether the pool can serve a trivial query.

    Returns:
        ``{"database": "healthy" | "unhealthy" | "not_initialized"}``.
    """
    if pool is None:
        return {"database": "not_initialized"}

    try:
        async with pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except (asyncpg.PostgresError, OSError, TimeoutError):
        logger.warning("Database health check failed")
        return {"database": "unhealthy"}
    return {"database": "healthy"}
