"""Service endpoints: API description and health check."""

from __future__ import annotations

import structlog
from django.db import connections  # type: ignore
from django.db.utils import DatabaseError  # type: ignore
from django.http import JsonResponse  # type: ignore
from django.utils import timezone  # type: ignore
from django.views.decorators.http import require_GET  # type: ignore

logger = structlog.get_logger(__name__)


@require_GET
def api_root(request):
    """Describe the API and where each kind of data lives."""
    return JsonResponse(
        {
            "message": "Padel Club API",
            "version": "1.0.0",
            "databases": {
                "catalog": "Static content (rackets, articles)",
                "default": "Dynamic data (users, bookings, tournaments, courts)",
            },
            "endpoints": {
                "static": ["/api/rackets/", "/api/articles/"],
                "dynamic": ["/api/users/", "/api/bookings/", "/api/tournaments/", "/api/courts/"],
            },
        }
    )


def _ping(alias: str) -> bool:
    try:
        with connections[alias].cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as exc:
        logger.warning("healthz.db_unreachable", database=alias, error=str(exc))
        return False
    return True


@require_GET
def healthz(request):
    """Health check endpoint for both database aliases."""
    services = {alias: "connected" if _ping(alias) else "disconnected" for alias in ("default", "catalog")}
    healthy = all(state == "connected" for state in services.values())
    if healthy:
        logger.info("healthz.ok", **services)
    return JsonResponse(
        {
            "status": "ok" if healthy else "error",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200 if healthy else 503,
    )
