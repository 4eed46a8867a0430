"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application from settings
- Sets up the middleware stack
- Registers exception handlers and the rate limiter
- Mounts API routers and the metrics endpoint
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from recifind.api.router import router as api_router
from recifind.core.config import Settings, get_settings
from recifind.core.events import lifespan
from recifind.core.exceptions import setup_exception_handlers
from recifind.core.middleware.logging import LoggingMiddleware
from recifind.core.middleware.request_id import RequestIDMiddleware
from recifind.core.rate_limit import setup_rate_limiting
from recifind.observability.metrics import setup_metrics


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Recifind API - favorite recipes and an AI cooking assistant",
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        debug=settings.app.debug,
    )

    # Read by the lifespan handler
    app.state.settings = settings

    setup_rate_limiting(app, settings)
    setup_exception_handlers(app)
    _setup_middleware(app, settings)
    app.include_router(api_router, prefix=settings.api.prefix)

    # After routes are mounted
    setup_metrics(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Middleware runs in reverse order of addition. On a request:
    1. RequestIDMiddleware (binds request ID for log correlation)
    2. LoggingMiddleware (logs and times the request)
    3. CORSMiddleware (handles CORS)
    """
    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-ID", "X-Process-Time"],
        )

    prefix = settings.api.prefix
    app.add_middleware(
        LoggingMiddleware,
        exclude_paths={f"{prefix}/health", f"{prefix}/ready", "/metrics"},
    )
    app.add_middleware(RequestIDMiddleware)
