"""Catalog models, routed to the `catalog` database."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Article(models.Model):
    """News or tips published by the club."""

    title = models.CharField(max_length=255)
    content = models.TextField()
    image = models.CharField(max_length=255, blank=True, help_text=_("Image path or URL."))
    # Plain id: users live in the other database.
    author_id = models.PositiveIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Article")
        verbose_name_plural = _("Articles")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.title


class Racket(models.Model):
    class Balance(models.TextChoices):
        LOW = "low", _("Low")
        MEDIUM = "medium", _("Medium")
        HIGH = "high", _("High")

    class Shape(models.TextChoices):
        ROUND = "round", _("Round")
        TEARDROP = "teardrop", _("Teardrop")
        DIAMOND = "diamond", _("Diamond")

    brand = models.CharField(max_length=100)
    model = models.CharField(max_length=150)
    price = models.DecimalField(
        max_digits=7,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    weight = models.PositiveSmallIntegerField(help_text=_("Weight in grams."))
    balance = models.CharField(max_length=10, choices=Balance.choices)
    shape = models.CharField(max_length=10, choices=Shape.choices)
    description = models.TextField(blank=True)
    image = models.CharField(max_length=255, blank=True)

    class Meta:
        verbose_name = _("Racket")
        verbose_name_plural = _("Rackets")
        ordering = ["brand", "model"]
        indexes = [
            models.Index(fields=["brand"], name="catalog_racket_brand_idx"),
            models.Index(fields=["price"], name="catalog_racket_price_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.brand} {self.model}"
