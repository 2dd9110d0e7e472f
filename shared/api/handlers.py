"""Exception handling that renders every failure in the API error envelope."""

from __future__ import annotations

import structlog
from django.conf import settings  # type: ignore
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied  # type: ignore
from django.http import Http404, JsonResponse  # type: ignore
from rest_framework import exceptions as drf_exceptions  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from .exceptions import ApiError

logger = structlog.get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong."

_DRF_ERROR_CODES: tuple[tuple[type[Exception], str], ...] = (
    (drf_exceptions.ValidationError, "validation_error"),
    (drf_exceptions.ParseError, "validation_error"),
    (drf_exceptions.NotAuthenticated, "auth_error"),
    (drf_exceptions.AuthenticationFailed, "auth_error"),
    (drf_exceptions.PermissionDenied, "auth_error"),
    (drf_exceptions.NotFound, "not_found"),
    (drf_exceptions.MethodNotAllowed, "method_not_allowed"),
    (drf_exceptions.Throttled, "throttled"),
)


def error_body(error: str, message: str, details=None) -> dict:
    body = {"success": False, "error": error, "message": message}
    if details is not None:
        body["details"] = details
    return body


def _error_code(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.error_code
    for exc_class, code in _DRF_ERROR_CODES:
        if isinstance(exc, exc_class):
            return code
    return getattr(exc, "default_code", "error")


def _message_and_details(exc: drf_exceptions.APIException, data):
    if isinstance(exc, ApiError):
        return exc.message, exc.details
    if isinstance(exc, drf_exceptions.ValidationError):
        return "Invalid input.", data
    detail = exc.detail
    # SimpleJWT's InvalidToken carries a dict detail with a nested "detail".
    if isinstance(detail, dict):
        return str(detail.get("detail", exc.default_detail)), None
    return str(detail), None


def api_exception_handler(exc, context):
    """DRF ``EXCEPTION_HANDLER``: wrap known errors, log and hide unknown ones."""

    if isinstance(exc, Http404):
        exc = drf_exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = drf_exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "api.unhandled_exception",
            view=view.__class__.__name__ if view else None,
            exc_info=exc,
        )
        message = str(exc) if settings.DEBUG else GENERIC_ERROR_MESSAGE
        return Response(error_body("internal_error", message), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    message, details = _message_and_details(exc, response.data)
    response.data = error_body(_error_code(exc), message, details)
    if response.status_code >= 500:
        logger.error("api.server_error", status=response.status_code, message=message)
    return response


def not_found_view(request, exception=None):
    """``handler404`` for routes outside DRF."""
    return JsonResponse(
        error_body("not_found", f"The route {request.path} does not exist."),
        status=status.HTTP_404_NOT_FOUND,
    )


def server_error_view(request):
    """``handler500`` for failures outside DRF views."""
    return JsonResponse(
        error_body("internal_error", GENERIC_ERROR_MESSAGE),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
