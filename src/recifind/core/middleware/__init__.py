"""HTTP middleware."""

from recifind.core.middleware.logging import LoggingMiddleware
from recifind.core.middleware.request_id import RequestIDMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
]
