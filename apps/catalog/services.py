"""Aggregations behind the catalog stats endpoints."""

from __future__ import annotations

from decimal import Decimal

from django.db.models import Avg, Case, CharField, Count, Max, Min, Value, When  # type: ignore
from django.db.models.functions import TruncDate  # type: ignore

from .models import Article, Racket

RECENT_ARTICLES = 5

# (key, label, upper bound inclusive); the last band has no bound.
PRICE_BANDS = (
    ("budget", "Budget (< 130 EUR)", Decimal("130")),
    ("intermediate", "Intermediate (130-160 EUR)", Decimal("160")),
    ("premium", "Premium (160-190 EUR)", Decimal("190")),
    ("professional", "Professional (> 190 EUR)", None),
)


def article_summary() -> dict:
    stats = Article.objects.aggregate(
        total_articles=Count("id"),
        total_authors=Count("author_id", distinct=True),
        first_article=Min(TruncDate("created_at")),
        last_article=Max(TruncDate("created_at")),
    )
    recent = Article.objects.order_by("-created_at")[:RECENT_ARTICLES]
    return {"stats": stats, "recent_articles": list(recent)}


def racket_brand_stats() -> list[dict]:
    return list(
        Racket.objects.order_by()
        .values("brand")
        .annotate(
            count=Count("id"),
            avg_price=Avg("price"),
            min_price=Min("price"),
            max_price=Max("price"),
        )
        .order_by("brand")
    )


def _band_case() -> Case:
    # "< 130" is strict, the following bands include their upper bound.
    whens = [When(price__lt=PRICE_BANDS[0][2], then=Value(PRICE_BANDS[0][0]))]
    whens += [When(price__lte=upper, then=Value(key)) for key, _, upper in PRICE_BANDS[1:-1]]
    return Case(*whens, default=Value(PRICE_BANDS[-1][0]), output_field=CharField())


def racket_price_stats() -> dict:
    general = Racket.objects.aggregate(
        total_rackets=Count("id"),
        avg_price=Avg("price"),
        min_price=Min("price"),
        max_price=Max("price"),
        avg_weight=Avg("weight"),
        min_weight=Min("weight"),
        max_weight=Max("weight"),
    )
    counts = dict(
        Racket.objects.order_by()
        .annotate(band=_band_case())
        .values("band")
        .annotate(count=Count("id"))
        .values_list("band", "count")
    )
    bands = [
        {"band": key, "label": label, "count": counts[key]}
        for key, label, _ in PRICE_BANDS
        if key in counts
    ]
    return {"general": general, "price_bands": bands}
