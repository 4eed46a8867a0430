"""DDL for the ``favorites`` table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from recifind.observability.logging import get_logger


if TYPE_CHECKING:
    from asyncpg import Connection

logger = get_logger(__name__)

FAVORITES_TABLE: Final[str] = "favorites"

# Upper bound of the Postgres INTEGER columns (recipe_id, servings).
MAX_POSTGRES_INT: Final[int] = 2**31 - 1

# No unique (user_id, recipe_id) constraint: duplicate favorites are allowed.
CREATE_FAVORITES_TABLE: Final[str] = f"""
    CREATE TABLE IF NOT EXISTS {FAVORITES_TABLE} (
        id SERIAL PRIMARY KEY,
        user_id TEXT NOT NULL,
        recipe_id INTEGER NOT NULL,
        title TEXT NOT NULL,
        image TEXT,
        cook_time TEXT,
        servings INTEGER,
        created_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
"""

CREATE_FAVORITES_USER_INDEX: Final[str] = f"""
    CREATE INDEX IF NOT EXISTS ix_{FAVORITES_TABLE}_user_id
        ON {FAVORITES_TABLE} (user_id)
"""


async def ensure_schema(conn: Connection) -> None:
    """Create the favorites table and its user index if missing."""
    async with conn.transaction():
        await conn.execute(CREATE_FAVORITES_TABLE)
        await conn.execute(CREATE_FAVORITES_USER_INDEX)
    logger.info("Database schema ensured", table=FAVORITES_TABLE)
