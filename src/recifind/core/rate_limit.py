"""Rate limiting using SlowAPI.

The AI routes each call a paid upstream API, so they are throttled per
client IP address. Storage defaults to in-process memory and can be pointed
at Redis through ``rate_limiting.storage_uri``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from slowapi import Limiter
from slowapi.util import get_remote_address

from recifind.core.config import get_settings
from recifind.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from recifind.core.config import Settings

logger = get_logger(__name__)


def create_limiter() -> Limiter:
    """Create and configure the rate limiter."""
    settings = get_settings()

    return Limiter(
        key_func=get_remote_address,
        storage_uri=settings.rate_limiting.storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limiting.enabled,
    )


# Route decorators bind to this instance at import time.
limiter = create_limiter()


def setup_rate_limiting(app: FastAPI, settings: Settings) -> None:
    """Attach the limiter to the application.

    ``RateLimitExceeded`` is rendered by the shared exception handlers.
    """
    limiter.enabled = settings.rate_limiting.enabled
    app.state.limiter = limiter
    logger.info("Rate limiting configured", enabled=limiter.enabled)


def rate_limit_ai() -> Any:
    """Apply the AI route rate limit.

    Example:
        @router.post("/ai/chat")
        @rate_limit_ai()
        async def chat(request: Request, ...):
            ...
    """
    return limiter.limit(lambda: get_settings().rate_limiting.ai)
