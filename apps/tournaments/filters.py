import django_filters  # type: ignore

from .models import Tournament


class TournamentFilterSet(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=Tournament.Status.choices)
    category = django_filters.CharFilter(lookup_expr="iexact")

    class Meta:
        model = Tournament
        fields = ["status", "category"]
