"""Background job workers using ARQ."""

from recifind.workers.arq import WorkerSettings, build_cron_jobs, get_redis_settings


__all__ = [
    "WorkerSettings",
    "build_cron_jobs",
    "get_redis_settings",
]
