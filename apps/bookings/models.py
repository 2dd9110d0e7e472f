"""Booking models for the club."""

from __future__ import annotations

import secrets
from decimal import Decimal

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import TimeSlot


class Booking(models.Model):
    """A court reservation made by a member."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")

    ACTIVE_STATUSES = (Status.PENDING, Status.CONFIRMED)

    booking_code = models.CharField(max_length=12, unique=True, editable=False)
    court = models.ForeignKey(
        "courts.Court",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    player_name = models.CharField(max_length=150)
    owner_email = models.EmailField(
        help_text=_("Email of the member who made the booking."),
    )
    start_time = models.DateTimeField()
    duration_hours = models.DecimalField(
        max_digits=4,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01")), MaxValueValidator(Decimal("24"))],
    )
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
    )
    price = models.DecimalField(
        max_digits=8,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Court hourly price times duration, fixed when booked."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-start_time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(duration_hours__gt=0, duration_hours__lte=24),
                name="booking_duration_range",
            ),
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="booking_non_negative_price",
            ),
        ]
        indexes = [
            models.Index(fields=["court", "start_time"], name="booking_court_start_idx"),
            models.Index(fields=["owner_email"], name="booking_owner_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.booking_code} on {self.court_name}"

    def save(self, *args, **kwargs):  # type: ignore[override]
        if not self.booking_code:
            self.booking_code = self._generate_booking_code()
        super().save(*args, **kwargs)

    @staticmethod
    def _generate_booking_code() -> str:
        return secrets.token_hex(4).upper()

    @property
    def court_name(self) -> str:
        return self.court.name

    @property
    def slot(self) -> TimeSlot:
        return TimeSlot.from_duration(self.start_time, self.duration_hours)

    @property
    def end_time(self):
        return self.slot.end

    @property
    def is_active(self) -> bool:
        return self.status in self.ACTIVE_STATUSES
