"""Background task definitions."""

from recifind.workers.tasks.keepalive import ping_service


__all__ = ["ping_service"]
