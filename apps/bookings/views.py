"""Booking API views."""

from __future__ import annotations

from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from apps.users.identity import Identity
from shared.api.exceptions import NotFoundError
from shared.api.responses import success_response

from .filters import BookingFilterSet
from .serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    BookingUpdateSerializer,
)
from .services import BookingService


class BookingViewSet(viewsets.GenericViewSet):
    """
    Court bookings.

    Reads are public. Creating needs a member token; only the member who
    made a booking may update or delete it.
    """

    serializer_class = BookingSerializer
    filterset_class = BookingFilterSet
    permission_classes = [permissions.IsAuthenticatedOrReadOnly]
    service_class = BookingService
    lookup_value_regex = r"\d+"

    def get_service(self) -> BookingService:
        return self.service_class()

    def get_queryset(self):  # type: ignore
        return self.get_service().store.queryset().order_by("-start_time")

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action in {"update", "partial_update"}:
            return BookingUpdateSerializer
        return BookingSerializer

    def list(self, request, *args, **kwargs):  # type: ignore
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        serializer = BookingSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    def retrieve(self, request, pk=None):  # type: ignore
        booking = self.get_service().store.find_by_id(pk)
        if booking is None:
            raise NotFoundError("Booking not found.")
        return success_response(BookingSerializer(booking).data)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = self.get_service().create_booking(
            Identity.from_user(request.user),
            **serializer.validated_data,
        )
        return success_response(
            BookingSerializer(booking).data,
            message="Booking created.",
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, pk=None, partial=False):  # type: ignore
        serializer = BookingUpdateSerializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        booking = self.get_service().update_booking(
            Identity.from_user(request.user),
            pk,
            serializer.validated_data,
        )
        return success_response(BookingSerializer(booking).data, message="Booking updated.")

    def partial_update(self, request, pk=None):  # type: ignore
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):  # type: ignore
        booking_id = self.get_service().delete_booking(Identity.from_user(request.user), pk)
        return success_response({"id": booking_id}, message="Booking deleted.")

    @action(detail=False, methods=["get"], url_path="stats/dashboard")
    def dashboard(self, request):
        return success_response(self.get_service().dashboard())
