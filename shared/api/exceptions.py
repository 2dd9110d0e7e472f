"""Error taxonomy surfaced by every endpoint.

Each error is a DRF ``APIException`` so views and services can simply raise
it; ``shared.api.handlers.api_exception_handler`` turns it into the
``{"success": false, "error", "message"}`` envelope.
"""

from __future__ import annotations

from typing import Any

from rest_framework import status  # type: ignore
from rest_framework.exceptions import APIException  # type: ignore


class ApiError(APIException):
    """Base class carrying a stable machine-readable ``error_code``."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "error"
    default_detail = "Request could not be processed."

    def __init__(self, message: str | None = None, *, details: Any = None, status_code: int | None = None):
        super().__init__(detail=message or self.default_detail, code=self.error_code)
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    @property
    def message(self) -> str:
        return str(self.detail)


class ValidationError(ApiError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "validation_error"
    default_detail = "Invalid input."


class NotFoundError(ApiError):
    """The referenced booking, court or record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "not_found"
    default_detail = "Resource not found."


class ConflictError(ApiError):
    """The requested slot (or unique value) is already taken."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "conflict"
    default_detail = "Resource conflict."


class AuthError(ApiError):
    """Missing, invalid or expired identity, or an ownership mismatch.

    Defaults to 401; ownership checks raise it with ``status_code=403``.
    """

    status_code = status.HTTP_401_UNAUTHORIZED
    error_code = "auth_error"
    default_detail = "Authentication required."

    @classmethod
    def forbidden(cls, message: str) -> "AuthError":
        return cls(message, status_code=status.HTTP_403_FORBIDDEN)
