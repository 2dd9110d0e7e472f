"""Limit/offset pagination rendered in the success envelope."""

from __future__ import annotations

import math

from rest_framework.pagination import LimitOffsetPagination  # type: ignore
from rest_framework.response import Response  # type: ignore


class EnvelopeLimitOffsetPagination(LimitOffsetPagination):
    """``?limit=&offset=`` pagination returning ``{success, data, pagination}``.

    ``default_limit`` falls back to ``REST_FRAMEWORK['PAGE_SIZE']``; views set
    their own default by subclassing with another ``default_limit``.
    """

    max_limit = 100

    def get_paginated_response(self, data):  # type: ignore
        limit = self.limit or 0
        return Response(
            {
                "success": True,
                "data": data,
                "pagination": {
                    "total": self.count,
                    "limit": limit,
                    "offset": self.offset,
                    "pages": math.ceil(self.count / limit) if limit else 0,
                },
            }
        )

    def get_paginated_response_schema(self, schema):  # type: ignore
        return {
            "type": "object",
            "required": ["success", "data", "pagination"],
            "properties": {
                "success": {"type": "boolean", "example": True},
                "data": schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "total": {"type": "integer", "example": 42},
                        "limit": {"type": "integer", "example": 20},
                        "offset": {"type": "integer", "example": 0},
                        "pages": {"type": "integer", "example": 3},
                    },
                },
            },
        }


class CatalogPagination(EnvelopeLimitOffsetPagination):
    default_limit = 10


class RacketPagination(EnvelopeLimitOffsetPagination):
    default_limit = 50
