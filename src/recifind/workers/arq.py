"""ARQ worker configuration.

This module provides:
- Worker settings and configuration
- Redis connection settings for the worker
- Startup/shutdown handlers
- The keep-alive cron job, scheduled in production only

Run with: arq recifind.workers.arq.WorkerSettings
"""

from __future__ import annotations

from collections.abc import Callable, Coroutine
from typing import TYPE_CHECKING, Any, ClassVar

import httpx
from arq import cron
from arq.connections import RedisSettings

from recifind.core.config import Settings, get_settings
from recifind.observability.logging import get_logger, setup_logging
from recifind.workers.tasks.keepalive import ping_service


if TYPE_CHECKING:
    from arq.cron import CronJob


logger = get_logger(__name__)

# Type alias for ARQ worker functions
WorkerFunction = Callable[..., Coroutine[Any, Any, Any]]


async def startup(ctx: dict[str, Any]) -> None:
    """Worker startup handler.

    Args:
        ctx: Worker context dictionary for storing shared state.
    """
    settings = get_settings()

    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )

    logger.info(
        "ARQ worker starting",
        environment=settings.APP_ENV,
        keepalive_scheduled=settings.is_production,
    )

    # The loopback default only reaches an API on the worker's own host.
    if settings.is_production and not settings.keepalive.url:
        msg = "keepalive.url must be set in production (env KEEPALIVE__URL)"
        raise ValueError(msg)

    ctx["settings"] = settings
    ctx["http_client"] = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.keepalive.timeout),
        follow_redirects=True,
    )


async def shutdown(ctx: dict[str, Any]) -> None:
    """Worker shutdown handler.

    Args:
        ctx: Worker context dictionary containing initialized resources.
    """
    logger.info("ARQ worker shutting down")

    http_client: httpx.AsyncClient | None = ctx.get("http_client")
    if http_client is not None:
        await http_client.aclose()
        logger.debug("Closed HTTP client")


def get_redis_settings(settings: Settings | None = None) -> RedisSettings:
    """Get Redis settings for ARQ."""
    settings = settings or get_settings()

    return RedisSettings(
        host=settings.redis.host,
        port=settings.redis.port,
        username=settings.redis.user,
        password=settings.REDIS_PASSWORD or None,
        database=settings.redis.queue_db,
    )


def keepalive_minutes(interval_minutes: int) -> set[int]:
    """Minutes of the hour on which the keep-alive ping fires.

    The schedule restarts at minute 0 each hour, so an interval that does
    not divide 60 leaves a shorter gap across the hour boundary.
    """
    if not 1 <= interval_minutes <= 59:
        msg = f"keep-alive interval must be 1-59 minutes, got {interval_minutes}"
        raise ValueError(msg)
    return set(range(0, 60, interval_minutes))


def build_cron_jobs(settings: Settings) -> list[CronJob]:
    """Build the scheduled jobs for this environment.

    Only production schedules the keep-alive ping.
    """
    if not settings.is_production:
        return []
    return [
        cron(
            ping_service,  # type: ignore[arg-type]
            minute=keepalive_minutes(settings.keepalive.interval_minutes),
        ),
    ]


_settings = get_settings()


class WorkerSettings:
    """ARQ worker settings class, read by the arq CLI."""

    redis_settings = get_redis_settings(_settings)

    queue_name = _settings.arq.queue_name
    health_check_key = _settings.arq.health_check_key

    # Lifecycle hooks
    on_startup = startup
    on_shutdown = shutdown

    job_timeout = 60
    max_jobs = 10
    keep_result = 3600
    # A missed ping is not retried; the next scheduled run replaces it.
    max_tries = 1

    functions: ClassVar[list[WorkerFunction]] = [ping_service]

    cron_jobs: ClassVar[list[CronJob]] = build_cron_jobs(_settings)
