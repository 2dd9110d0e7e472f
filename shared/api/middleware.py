"""Request logging middleware."""

from __future__ import annotations

import time
import uuid

import structlog

logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware:
    """Bind a request id to the log context and log one event per request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = round((time.monotonic() - started) * 1000, 2)

        logger.info(
            "http.request",
            method=request.method,
            path=request.path,
            status=response.status_code,
            duration_ms=duration_ms,
        )
        response["X-Request-ID"] = request_id
        return response
