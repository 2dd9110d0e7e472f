"""FilterSet for the court list."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Court


class CourtFilterSet(django_filters.FilterSet):
    active = django_filters.BooleanFilter(field_name="is_active")
    court_type = django_filters.ChoiceFilter(choices=Court.CourtType.choices)
    covered = django_filters.BooleanFilter(field_name="is_covered")

    class Meta:
        model = Court
        fields = ["active", "court_type", "covered"]
