"""Catalog API views (articles and rackets)."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from shared.api.pagination import CatalogPagination, RacketPagination
from shared.api.responses import success_response

from . import services
from .filters import ArticleFilterSet, RacketFilterSet
from .models import Article, Racket
from .serializers import ArticleSerializer, ArticleSummarySerializer, RacketSerializer


class ArticleViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Article.objects.all().order_by("-created_at")
    serializer_class = ArticleSerializer
    filterset_class = ArticleFilterSet
    pagination_class = CatalogPagination
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = r"\d+"

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        return success_response(self.get_serializer(self.get_object()).data)

    @action(detail=False, methods=["get"], url_path="stats/summary")
    def summary(self, request):
        summary = services.article_summary()
        return success_response(
            {
                "stats": summary["stats"],
                "recent_articles": ArticleSummarySerializer(summary["recent_articles"], many=True).data,
            }
        )


class RacketViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Racket.objects.all().order_by("brand", "model")
    serializer_class = RacketSerializer
    filterset_class = RacketFilterSet
    pagination_class = RacketPagination
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = r"\d+"

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        return success_response(self.get_serializer(self.get_object()).data)

    @action(detail=False, methods=["get"], url_path="stats/brands")
    def brands(self, request):
        return success_response(services.racket_brand_stats())

    @action(detail=False, methods=["get"], url_path="stats/prices")
    def prices(self, request):
        return success_response(services.racket_price_stats())
