"""Court API views: listing, availability and the daily schedule."""

from __future__ import annotations

from rest_framework import mixins, permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from apps.bookings.services import BookingService
from shared.api.exceptions import ValidationError
from shared.api.responses import success_response

from .filters import CourtFilterSet
from .models import Court
from .serializers import AvailabilityQuerySerializer, CourtSerializer, ScheduleQuerySerializer


class CourtViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    queryset = Court.objects.all()
    serializer_class = CourtSerializer
    filterset_class = CourtFilterSet
    permission_classes = [permissions.AllowAny]
    pagination_class = None
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if self.action == "list" and "active" not in self.request.query_params:
            qs = qs.filter(is_active=True)
        return qs.order_by("hourly_price", "name")

    def list(self, request, *args, **kwargs):  # type: ignore
        courts = self.filter_queryset(self.get_queryset())
        return success_response(CourtSerializer(courts, many=True).data)

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        return success_response(CourtSerializer(self.get_object()).data)

    @action(detail=False, methods=["get"], url_path=r"availability/(?P<name>[^/]+)")
    def availability(self, request, name=None):
        """Whether the court is free at `date` for `duration` hours."""
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        start = query.validated_data.get("date")
        duration = query.validated_data["duration"]
        if not start:
            raise ValidationError("Query parameter 'date' is required.", details={"date": "required"})

        court, result = BookingService().query_availability(name, start, duration)
        return success_response(
            {
                "court": court.name,
                "date": start,
                "duration": duration,
                "available": result.available,
                "conflictCount": result.conflict_count,
            }
        )

    @action(detail=False, methods=["get"], url_path=r"schedule/(?P<name>[^/]+)")
    def schedule(self, request, name=None):
        """Hourly grid of the court for one day."""
        query = ScheduleQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        return success_response(BookingService().court_schedule(name, query.validated_data["date"]))
