"""Prometheus metrics instrumentation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from prometheus_fastapi_instrumentator import Instrumentator, metrics

from recifind.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import FastAPI

    from recifind.core.config import Settings

logger = get_logger(__name__)

METRIC_NAMESPACE = "recifind"
METRICS_ENDPOINT = "/metrics"


def setup_metrics(app: FastAPI, settings: Settings) -> Instrumentator | None:
    """Instrument the app and expose ``/metrics``.

    Records request count, latency and in-progress gauges per route
    template. Probe routes are excluded so they do not drown out real
    traffic.

    Args:
        app: The FastAPI application instance.
        settings: Application settings.

    Returns:
        The configured instrumentator, or None when metrics are disabled.
    """
    if not settings.observability.metrics.enabled:
        logger.info("Metrics collection disabled")
        return None

    prefix = settings.api.prefix
    instrumentator = Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        should_instrument_requests_inprogress=True,
        excluded_handlers=[
            f"{prefix}/health",
            f"{prefix}/ready",
            METRICS_ENDPOINT,
        ],
        inprogress_name="http_requests_inprogress",
        inprogress_labels=True,
    )
    instrumentator.add(
        metrics.default(
            metric_namespace=METRIC_NAMESPACE,
            metric_subsystem="http",
        )
    )
    instrumentator.instrument(app)
    instrumentator.expose(
        app,
        endpoint=METRICS_ENDPOINT,
        include_in_schema=False,
    )

    logger.info("Prometheus metrics configured", endpoint=METRICS_ENDPOINT)
    return instrumentator


__all__ = ["setup_metrics"]
