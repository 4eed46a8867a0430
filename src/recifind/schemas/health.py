"""Health check response schemas."""

from __future__ import annotations

from pydantic import Field

from recifind.schemas.base import APIResponse


class HealthResponse(APIResponse):
    """Liveness probe response."""

    success: bool = Field(default=True, description="Service is up")


class ReadinessResponse(HealthResponse):
    """Readiness probe response with dependency status."""

    dependencies: dict[str, str] = Field(
        default_factory=dict,
        description="Status of external dependencies",
    )
