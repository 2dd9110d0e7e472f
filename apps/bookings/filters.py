"""FilterSet for the booking list."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Booking.Status.choices)
    court = django_filters.CharFilter(field_name="court__name", lookup_expr="icontains")
    player = django_filters.CharFilter(field_name="player_name", lookup_expr="icontains")
    date_from = django_filters.IsoDateTimeFilter(field_name="start_time", lookup_expr="gte")
    date_to = django_filters.IsoDateTimeFilter(field_name="start_time", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = ["status", "court", "player", "date_from", "date_to"]
