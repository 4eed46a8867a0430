"""Health check endpoints.

Provides liveness and readiness probes for the hosting platform.
"""

from __future__ import annotations

from typing import Annotated

from asyncpg import Pool  # noqa: TC002
from fastapi import APIRouter, Depends, status
from fastapi.responses import ORJSONResponse

from recifind.api.dependencies import get_db_pool
from recifind.database.connection import check_database_health
from recifind.schemas.health import HealthResponse, ReadinessResponse


router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check() -> HealthResponse:
    """Check if the service is alive.

    Does not touch any external dependency.
    """
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Readiness check verifying the database is reachable.",
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(
    pool: Annotated[Pool | None, Depends(get_db_pool)],
) -> ReadinessResponse | ORJSONResponse:
    """Check if the service is ready to handle requests."""
    dependencies = await check_database_health(pool)
    all_healthy = all(value == "healthy" for value in dependencies.values())

    body = ReadinessResponse(success=all_healthy, dependencies=dependencies)
    if all_healthy:
        return body
    return ORJSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=body.model_dump(mode="json", by_alias=True),
    )
