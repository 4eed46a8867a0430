"""Unit tests for AI route rate limiting."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient

from recifind.core.config import Settings
from recifind.core.rate_limit import limiter, setup_rate_limiting
from recifind.factory import create_app


if TYPE_CHECKING:
    from collections.abc import Generator


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def reset_limiter() -> Generator[None]:
    """Clear counters and restore the disabled state after each test."""
    limiter.reset()
    yield
    limiter.reset()
    limiter.enabled = False


class TestSetupRateLimiting:
    """Tests for setup_rate_limiting."""

    def test_attaches_limiter_to_app(self) -> None:
        """Should store the shared limiter on app state."""
        app = MagicMock()

        setup_rate_limiting(app, Settings(rate_limiting={"enabled": True}))

        assert app.state.limiter is limiter
        assert limiter.enabled is True

    def test_can_disable(self) -> None:
        """Should follow the enabled flag."""
        setup_rate_limiting(MagicMock(), Settings(rate_limiting={"enabled": False}))

        assert limiter.enabled is False


class TestAIRouteLimit:
    """Tests for the limit applied to the AI routes."""

    async def test_returns_429_over_limit(self) -> None:
        """Should reject requests beyond the configured AI limit."""
        settings = Settings(
            GOOGLE_GENERATIVE_AI_API_KEY="key",
            rate_limiting={"enabled": True, "ai": "2/minute"},
            observability={"metrics": {"enabled": False}},
        )
        app = create_app(settings)
        assistant = MagicMock()
        assistant.chat = AsyncMock(return_value="ok")
        app.state.assistant_service = assistant

        with patch("recifind.core.rate_limit.get_settings", return_value=settings):
            async with AsyncClient(
                transport=ASGITransport(app=app), base_url="http://test"
            ) as client:
                statuses = [
                    (
                        await client.post("/api/ai/chat", json={"userMessage": "Hi"})
                    ).status_code
                    for _ in range(3)
                ]
                limited = await client.post("/api/ai/chat", json={"userMessage": "Hi"})

        assert statuses == [200, 200, 429]
        assert limited.status_code == 429
        assert limited.json()["error"] == "RATE_LIMIT_EXCEEDED"
        assert limited.headers["Retry-After"] == "60"

    async def test_favorites_routes_are_not_limited(self) -> None:
        """Should leave non-AI routes unthrottled."""
        settings = Settings(
            rate_limiting={"enabled": True, "ai": "1/minute"},
            observability={"metrics": {"enabled": False}},
        )
        app = create_app(settings)
        repository = MagicMock()
        repository.list_for_user = AsyncMock(return_value=[])
        app.state.favorites_repository = repository

        with patch("recifind.core.rate_limit.get_settings", return_value=settings):
            async with AsyncClient(
                transport=ASGITransport(app=app), base_url="http://test"
            ) as client:
                responses = [await client.get("/api/favorites/u1") for _ in range(3)]

        assert all(r.status_code == 200 for r in responses)
