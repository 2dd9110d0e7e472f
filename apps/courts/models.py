"""Court models."""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import Money


class Court(models.Model):
    """A bookable padel court."""

    class CourtType(models.TextChoices):
        INDOOR = "indoor", _("Indoor")
        OUTDOOR = "outdoor", _("Outdoor")

    name = models.CharField(max_length=50, unique=True)
    court_type = models.CharField(
        max_length=20,
        choices=CourtType.choices,
        default=CourtType.OUTDOOR,
    )
    is_covered = models.BooleanField(default=False)
    hourly_price = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Price per hour in EUR."),
    )
    is_active = models.BooleanField(default=True)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Court")
        verbose_name_plural = _("Courts")
        ordering = ["hourly_price", "name"]

    def __str__(self) -> str:
        return self.name

    def price_for(self, duration_hours) -> Money:
        """Price of renting the court for `duration_hours` hours."""
        return (Money(self.hourly_price) * Decimal(str(duration_hours))).rounded()
