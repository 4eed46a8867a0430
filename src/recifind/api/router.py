"""API router aggregating all endpoint routers.

Everything here is mounted under ``api.prefix`` (``/api`` by default).
"""

from __future__ import annotations

from fastapi import APIRouter

from recifind.api.endpoints import ai, favorites, health


router = APIRouter()

router.include_router(health.router)
router.include_router(favorites.router)
router.include_router(ai.router)
