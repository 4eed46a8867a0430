"""Keep-alive background task.

Hosting platforms that idle a web service after a period without traffic
are kept awake by pinging the service's own health endpoint on a schedule.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx

from recifind.observability.logging import get_logger


if TYPE_CHECKING:
    from recifind.core.config import Settings

logger = get_logger(__name__)


async def ping_service(ctx: dict[str, Any]) -> dict[str, Any]:
    """Send one GET request to the keep-alive URL.

    A failed ping is logged and reported in the result; it never raises, so
    the next scheduled run is unaffected.

    Args:
        ctx: ARQ worker context containing:
            - settings: Application settings
            - http_client: Shared httpx client

    Returns:
        Result dict with the URL, status and, when a response arrived,
        its status code.
    """
    settings: Settings = ctx["settings"]
    http_client: httpx.AsyncClient = ctx["http_client"]
    url = settings.keepalive_url

    try:
        response = await http_client.get(url)
    except httpx.HTTPError as e:
        logger.warning("Keep-alive ping failed", url=url, error=str(e))
        return {"status": "failed", "url": url, "error": str(e)}

    if response.is_success:
        logger.info("Keep-alive ping sent", url=url, status_code=response.status_code)
        status = "completed"
    else:
        logger.warning(
            "Keep-alive ping returned error status",
            url=url,
            status_code=response.status_code,
        )
        status = "failed"

    return {"status": status, "url": url, "status_code": response.status_code}
