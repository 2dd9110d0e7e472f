"""FilterSets for the catalog endpoints."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Q  # type: ignore

from .models import Article, Racket


class ArticleFilterSet(django_filters.FilterSet):
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Article
        fields = ["search"]

    def filter_search(self, queryset, name, value):
        return queryset.filter(Q(title__icontains=value) | Q(content__icontains=value))


class RacketFilterSet(django_filters.FilterSet):
    brand = django_filters.CharFilter(lookup_expr="icontains")
    price_min = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    price_max = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    weight_min = django_filters.NumberFilter(field_name="weight", lookup_expr="gte")
    weight_max = django_filters.NumberFilter(field_name="weight", lookup_expr="lte")
    balance = django_filters.ChoiceFilter(choices=Racket.Balance.choices)
    shape = django_filters.ChoiceFilter(choices=Racket.Shape.choices)

    class Meta:
        model = Racket
        fields = ["brand", "balance", "shape"]
