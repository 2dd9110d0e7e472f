"""Tournament models."""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Tournament(models.Model):
    class Status(models.TextChoices):
        SCHEDULED = "scheduled", _("Scheduled")
        OPEN = "open", _("Registration open")
        IN_PROGRESS = "in_progress", _("In progress")
        FINISHED = "finished", _("Finished")
        CANCELLED = "cancelled", _("Cancelled")

    UPCOMING_STATUSES = (Status.SCHEDULED, Status.OPEN)

    name = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    category = models.CharField(
        max_length=50,
        help_text=_("Free text, e.g. 'mixed', 'men 2nd division'."),
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.SCHEDULED,
    )
    start_date = models.DateField()
    end_date = models.DateField()
    max_teams = models.PositiveSmallIntegerField(default=16)
    entry_fee = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    prize = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Tournament")
        verbose_name_plural = _("Tournaments")
        ordering = ["start_date", "name"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_date__gte=models.F("start_date")),
                name="tournament_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["status", "start_date"], name="tournament_status_start_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.start_date:%d.%m.%Y})"

    def clean(self) -> None:
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError(_("A tournament cannot end before it starts."))
