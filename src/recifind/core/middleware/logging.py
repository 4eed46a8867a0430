"""Request logging middleware.

Logs when a request starts (DEBUG) and when it completes, with the status
code and how long it took. The duration is also returned in ``X-Process-Time``.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from recifind.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

logger = get_logger(__name__)

PROCESS_TIME_HEADER = "X-Process-Time"

# Requests slower than this are logged at WARNING (seconds).
SLOW_REQUEST_THRESHOLD = 5.0

DEFAULT_EXCLUDE_PATHS = frozenset({"/metrics", "/favicon.ico"})


def get_client_ip(request: Request) -> str:
    """Extract the client IP, honouring proxy headers."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip

    if request.client:
        return request.client.host

    return "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured request logging with timing."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: set[str] | frozenset[str] | None = None,
        slow_threshold: float = SLOW_REQUEST_THRESHOLD,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = (
            DEFAULT_EXCLUDE_PATHS if exclude_paths is None else exclude_paths
        )
        self.slow_threshold = slow_threshold

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log the completed request."""
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        bind_context(
            method=request.method,
            path=request.url.path,
            client_ip=get_client_ip(request),
        )

        logger.debug("Request started")

        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start_time
        duration_ms = round(elapsed * 1000, 2)

        response.headers[PROCESS_TIME_HEADER] = f"{duration_ms}ms"

        if elapsed > self.slow_threshold:
            logger.warning(
                "Slow request",
                status_code=response.status_code,
                duration_ms=duration_ms,
                threshold_ms=self.slow_threshold * 1000,
            )
        else:
            logger.info(
                "Request completed",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )

        return response
