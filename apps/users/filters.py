"""FilterSet for the member list."""

from __future__ import annotations

import django_filters  # type: ignore
from django.contrib.auth import get_user_model  # type: ignore

User = get_user_model()


class UserFilterSet(django_filters.FilterSet):
    level = django_filters.ChoiceFilter(choices=User.Level.choices)
    active = django_filters.BooleanFilter(field_name="is_active")

    class Meta:
        model = User
        fields = ["level", "active"]
