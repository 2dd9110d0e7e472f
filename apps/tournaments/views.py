"""Tournament API views."""

from __future__ import annotations

from django.utils import timezone  # type: ignore
from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from shared.api.responses import success_response

from .filters import TournamentFilterSet
from .models import Tournament
from .serializers import TournamentSerializer

UPCOMING_LIMIT = 5


class TournamentViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Tournament.objects.all().order_by("start_date", "name")
    serializer_class = TournamentSerializer
    filterset_class = TournamentFilterSet
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = r"\d+"

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        return success_response(self.get_serializer(self.get_object()).data)

    @action(detail=False, methods=["get"])
    def upcoming(self, request):
        """The next tournaments that are scheduled or open for registration."""
        tournaments = (
            Tournament.objects.filter(
                status__in=Tournament.UPCOMING_STATUSES,
                start_date__gte=timezone.localdate(),
            )
            .order_by("start_date", "name")[:UPCOMING_LIMIT]
        )
        return success_response(self.get_serializer(tournaments, many=True).data)
