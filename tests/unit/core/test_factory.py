"""Unit tests for application factory.

Tests cover:
- create_app function
- Middleware setup
- Router setup
"""

from __future__ import annotations

from unittest.mock import patch

import pytest
from fastapi import FastAPI

from recifind.core.config import Settings
from recifind.core.middleware.logging import LoggingMiddleware
from recifind.core.middleware.request_id import RequestIDMiddleware
from recifind.factory import create_app


pytestmark = pytest.mark.unit


def _route_paths(app: FastAPI) -> set[str]:
    return {route.path for route in app.routes}  # type: ignore[attr-defined]


class TestCreateApp:
    """Tests for create_app function."""

    def test_creates_fastapi_instance(self, test_settings: Settings) -> None:
        """Should create a FastAPI instance."""
        app = create_app(test_settings)

        assert isinstance(app, FastAPI)
        assert app.title == test_settings.app.name
        assert app.version == test_settings.app.version

    def test_stores_settings_in_state(self, test_settings: Settings) -> None:
        """Should store settings in app state for the lifespan."""
        app = create_app(test_settings)

        assert app.state.settings is test_settings

    def test_mounts_routes_under_api_prefix(self, test_settings: Settings) -> None:
        """Should mount every route under /api."""
        paths = _route_paths(create_app(test_settings))

        assert {
            "/api/health",
            "/api/ready",
            "/api/favorites",
            "/api/favorites/{user_id}",
            "/api/favorites/{user_id}/{recipe_id}",
            "/api/ai/chat",
            "/api/ai/quiz",
        } <= paths

    def test_custom_prefix(self) -> None:
        """Should honour api.prefix."""
        settings = Settings(
            api={"prefix": "/v2"}, observability={"metrics": {"enabled": False}}
        )

        assert "/v2/health" in _route_paths(create_app(settings))

    def test_disables_docs_in_production(self) -> None:
        """Should disable docs endpoints in production."""
        settings = Settings(
            APP_ENV="production", observability={"metrics": {"enabled": False}}
        )

        app = create_app(settings)

        assert app.docs_url is None
        assert app.openapi_url is None

    def test_enables_docs_in_development(self) -> None:
        """Should expose docs in development."""
        settings = Settings(
            APP_ENV="development", observability={"metrics": {"enabled": False}}
        )

        assert create_app(settings).docs_url == "/docs"

    def test_sets_up_metrics(self, test_settings: Settings) -> None:
        """Should hand the app to setup_metrics."""
        with patch("recifind.factory.setup_metrics") as setup_metrics:
            app = create_app(test_settings)

        setup_metrics.assert_called_once_with(app, test_settings)


class TestSetupMiddleware:
    """Tests for middleware registration."""

    def test_registers_request_id_and_logging(self, test_settings: Settings) -> None:
        """Should add the request id and logging middleware."""
        app = create_app(test_settings)

        classes = [m.cls for m in app.user_middleware]
        assert RequestIDMiddleware in classes
        assert LoggingMiddleware in classes

    def test_request_id_runs_first(self, test_settings: Settings) -> None:
        """Should bind the request id before the request is logged."""
        app = create_app(test_settings)

        classes = [m.cls for m in app.user_middleware]
        assert classes.index(RequestIDMiddleware) < classes.index(LoggingMiddleware)

    def test_adds_cors_when_origins_configured(self) -> None:
        """Should add CORS only when origins are set."""
        from fastapi.middleware.cors import CORSMiddleware

        with_cors = create_app(
            Settings(
                api={"cors_origins": ["http://localhost:8081"]},
                observability={"metrics": {"enabled": False}},
            )
        )
        without_cors = create_app(
            Settings(
                api={"cors_origins": []},
                observability={"metrics": {"enabled": False}},
            )
        )

        assert CORSMiddleware in [m.cls for m in with_cors.user_middleware]
        assert CORSMiddleware not in [m.cls for m in without_cors.user_middleware]
