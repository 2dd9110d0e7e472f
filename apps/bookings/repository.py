"""Persistence for bookings.

`BookingStore` is the only place that queries the Booking table, so the
service layer speaks in filters and ids rather than querysets.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from django.db.models import QuerySet  # type: ignore
from django.utils import timezone  # type: ignore

from .models import Booking


@dataclass
class BookingFilter:
    court_id: Optional[int] = None
    court_contains: Optional[str] = None
    statuses: Optional[Iterable[str]] = None
    player_contains: Optional[str] = None
    owner_email: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    starts_before: Optional[datetime] = None
    exclude_id: Optional[int] = None


class BookingStore:
    def __init__(self, using: Optional[str] = None):
        self.using = using

    def queryset(self, flt: Optional[BookingFilter] = None) -> QuerySet:
        qs = Booking.objects.using(self.using).select_related("court")
        if flt is None:
            return qs
        if flt.court_id is not None:
            qs = qs.filter(court_id=flt.court_id)
        if flt.court_contains:
            qs = qs.filter(court__name__icontains=flt.court_contains)
        if flt.statuses is not None:
            qs = qs.filter(status__in=list(flt.statuses))
        if flt.player_contains:
            qs = qs.filter(player_name__icontains=flt.player_contains)
        if flt.owner_email:
            qs = qs.filter(owner_email__iexact=flt.owner_email)
        if flt.date_from is not None:
            qs = qs.filter(start_time__gte=flt.date_from)
        if flt.date_to is not None:
            qs = qs.filter(start_time__lte=flt.date_to)
        if flt.starts_before is not None:
            qs = qs.filter(start_time__lt=flt.starts_before)
        if flt.exclude_id is not None:
            qs = qs.exclude(pk=flt.exclude_id)
        return qs

    def find(
        self,
        flt: Optional[BookingFilter] = None,
        *,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Booking]:
        qs = self.queryset(flt).order_by("-start_time")
        if limit is not None:
            return list(qs[offset:offset + limit])
        return list(qs[offset:])

    def find_by_id(self, booking_id) -> Optional[Booking]:
        return self.queryset().filter(pk=booking_id).first()

    def insert(self, booking: Booking) -> int:
        booking.save(using=self.using)
        return booking.pk

    def update_by_id(self, booking_id, changes: dict) -> int:
        """Apply `changes` and return the number of matched rows."""
        changes = {**changes, "updated_at": timezone.now()}
        return Booking.objects.using(self.using).filter(pk=booking_id).update(**changes)

    def delete_by_id(self, booking_id) -> int:
        deleted, _ = Booking.objects.using(self.using).filter(pk=booking_id).delete()
        return deleted

    def count(self, flt: Optional[BookingFilter] = None) -> int:
        return self.queryset(flt).count()
