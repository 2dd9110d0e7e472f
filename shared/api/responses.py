"""Success envelope helpers."""

from __future__ import annotations

from typing import Any

from rest_framework import status as http_status  # type: ignore
from rest_framework.response import Response  # type: ignore


def envelope(data: Any, message: str | None = None) -> dict:
    body: dict[str, Any] = {"success": True, "data": data}
    if message:
        body["message"] = message
    return body


def success_response(data: Any, *, message: str | None = None, status: int = http_status.HTTP_200_OK, headers=None) -> Response:
    return Response(envelope(data, message), status=status, headers=headers)
