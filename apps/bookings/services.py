"""Domain services for booking workflows."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Callable, Optional

import structlog
from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Count, Sum  # type: ignore
from django.db.models.functions import ExtractIsoWeekDay  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from django.utils import timezone  # type: ignore

from apps.courts.models import Court
from apps.users.identity import Identity
from shared.api.exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from shared.domain.value_objects import TimeSlot

from .domain.availability import (
    ACTIVE_STATUSES,
    MAX_DURATION,
    AvailabilityResult,
    check_availability,
    coerce_duration,
    day_schedule,
    parse_start,
    validate_request,
)
from .models import Booking
from .repository import BookingFilter, BookingStore

logger = structlog.get_logger(__name__)

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def _conflict_details(result: AvailabilityResult) -> dict:
    return {
        "conflicts": [
            {
                "id": booking.pk,
                "booking_code": booking.booking_code,
                "start_time": booking.start_time.isoformat(),
                "end_time": booking.end_time.isoformat(),
                "status": booking.status,
            }
            for booking in result.conflicts
        ]
    }


class BookingService:
    """Create, move, cancel and report on court bookings."""

    def __init__(
        self,
        store: Optional[BookingStore] = None,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self.store = store or BookingStore()
        self.clock = clock

    # Courts -----------------------------------------------------------

    def get_court(self, name: str, *, lock: bool = False) -> Court:
        qs = Court.objects.filter(name__iexact=name.strip())
        if lock:
            qs = _lock_queryset_if_possible(qs)
        court = qs.first()
        if court is None:
            raise NotFoundError(f"Court '{name}' does not exist.")
        return court

    def _blocking_bookings(self, court: Court, slot: TimeSlot, *, exclude_id=None) -> list[Booking]:
        """Active bookings on the court that could overlap `slot`."""
        return self.store.find(
            BookingFilter(
                court_id=court.pk,
                statuses=ACTIVE_STATUSES,
                # no booking runs longer than MAX_DURATION
                date_from=slot.start - MAX_DURATION,
                starts_before=slot.end,
                exclude_id=exclude_id,
            )
        )

    def query_availability(self, court_name, start, duration_hours) -> tuple[Court, AvailabilityResult]:
        """Read-only check; past starts are not rejected here."""
        requested = validate_request(court_name, start, duration_hours)
        court = self.get_court(court_name)
        existing = self._blocking_bookings(court, requested)
        return court, check_availability(court.name, requested.start, duration_hours, existing)

    def court_schedule(self, court_name: str, day: date) -> dict:
        court = self.get_court(court_name)
        opening = settings.CLUB_OPENING_HOUR
        closing = settings.CLUB_CLOSING_HOUR
        tz = timezone.get_current_timezone()
        day_start = timezone.make_aware(datetime.combine(day, time.min), tz)
        existing = self.store.find(
            BookingFilter(
                court_id=court.pk,
                statuses=ACTIVE_STATUSES,
                date_from=day_start - MAX_DURATION,
                starts_before=day_start + timedelta(days=1),
            )
        )
        slots = day_schedule(
            court.name,
            day,
            existing,
            opening_hour=opening,
            closing_hour=closing,
            now=self.clock(),
            tz=tz,
        )
        return {
            "court": court.name,
            "date": day.isoformat(),
            "slots": [slot.as_dict() for slot in slots],
        }

    # Bookings ---------------------------------------------------------

    def create_booking(
        self,
        identity: Identity,
        *,
        court,
        start_time,
        duration_hours,
        player_name: str = "",
    ) -> Booking:
        requested = validate_request(court, start_time, duration_hours, now=self.clock())
        duration = coerce_duration(duration_hours)

        with transaction.atomic():
            court_obj = self.get_court(court, lock=True)
            if not court_obj.is_active:
                raise ValidationError(
                    f"Court '{court_obj.name}' is not open for bookings.",
                    details={"court": "inactive"},
                )
            existing = self._blocking_bookings(court_obj, requested)
            result = check_availability(court_obj.name, requested.start, duration, existing)
            if not result.available:
                logger.warning(
                    "bookings.conflict",
                    court=court_obj.name,
                    start_time=requested.start.isoformat(),
                    duration_hours=str(duration),
                    conflicts=result.conflict_count,
                )
                raise ConflictError(
                    "The court is already booked for that time.",
                    details=_conflict_details(result),
                )

            booking = Booking(
                court=court_obj,
                player_name=player_name or identity.name or identity.email,
                owner_email=identity.email,
                start_time=requested.start,
                duration_hours=duration,
                status=Booking.Status.PENDING,
                price=court_obj.price_for(duration).amount,
            )
            self.store.insert(booking)

        logger.info(
            "bookings.created",
            booking_id=booking.pk,
            booking_code=booking.booking_code,
            court=court_obj.name,
            owner=identity.email,
        )
        return booking

    def _owned_booking(self, identity: Identity, booking_id) -> Booking:
        booking = self.store.find_by_id(booking_id)
        if booking is None:
            raise NotFoundError("Booking not found.")
        if booking.owner_email.lower() != identity.email.lower():
            logger.warning("bookings.forbidden", booking_id=booking.pk, identity=identity.email)
            raise AuthError.forbidden("Only the member who made the booking can change it.")
        return booking

    def update_booking(self, identity: Identity, booking_id, changes: dict) -> Booking:
        booking = self._owned_booking(identity, booking_id)

        start = booking.start_time
        if changes.get("start_time") is not None:
            start = parse_start(changes["start_time"])
        duration = booking.duration_hours
        if changes.get("duration_hours") is not None:
            duration = coerce_duration(changes["duration_hours"])
        status = changes.get("status") or booking.status
        if status not in Booking.Status.values:
            raise ValidationError(
                f"Unknown status '{status}'.",
                details={"status": f"one of {', '.join(Booking.Status.values)}"},
            )

        court_changed = bool(changes.get("court")) and changes["court"].strip().lower() != booking.court_name.lower()
        start_changed = start != booking.start_time
        duration_changed = duration != booking.duration_hours
        reactivated = booking.status == Booking.Status.CANCELLED and status in ACTIVE_STATUSES

        partial: dict = {}
        with transaction.atomic():
            court = self.get_court(changes["court"] if court_changed else booking.court_name, lock=True)
            if court_changed and not court.is_active:
                raise ValidationError(
                    f"Court '{court.name}' is not open for bookings.",
                    details={"court": "inactive"},
                )
            if status in ACTIVE_STATUSES and (court_changed or start_changed or duration_changed or reactivated):
                requested = validate_request(
                    court.name,
                    start,
                    duration,
                    now=self.clock() if start_changed else None,
                )
                existing = self._blocking_bookings(court, requested, exclude_id=booking.pk)
                result = check_availability(court.name, start, duration, existing)
                if not result.available:
                    logger.warning(
                        "bookings.conflict",
                        booking_id=booking.pk,
                        court=court.name,
                        conflicts=result.conflict_count,
                    )
                    raise ConflictError(
                        "The court is already booked for that time.",
                        details=_conflict_details(result),
                    )

            if court_changed:
                partial["court"] = court
            if start_changed:
                partial["start_time"] = start
            if duration_changed:
                partial["duration_hours"] = duration
                partial["price"] = court.price_for(duration).amount
            if status != booking.status:
                partial["status"] = status
            if partial:
                self.store.update_by_id(booking.pk, partial)

        logger.info("bookings.updated", booking_id=booking.pk, fields=sorted(partial))
        return self.store.find_by_id(booking.pk)

    def delete_booking(self, identity: Identity, booking_id) -> int:
        booking = self._owned_booking(identity, booking_id)
        self.store.delete_by_id(booking.pk)
        logger.info("bookings.deleted", booking_id=booking.pk, booking_code=booking.booking_code)
        return booking.pk

    def dashboard(self) -> dict:
        """Booking totals grouped by status, court and weekday."""
        qs = self.store.queryset()
        revenue = qs.aggregate(revenue=Sum("price"))["revenue"]
        by_status = list(
            qs.order_by()
            .values("status")
            .annotate(count=Count("id"), revenue=Sum("price"))
            .order_by("status")
        )
        by_court = list(
            qs.order_by()
            .values("court__name")
            .annotate(count=Count("id"), revenue=Sum("price"))
            .order_by("-count", "court__name")
        )
        by_weekday = (
            qs.order_by()
            .annotate(weekday=ExtractIsoWeekDay("start_time"))
            .values("weekday")
            .annotate(count=Count("id"))
            .order_by("weekday")
        )
        return {
            "totals": {
                "count": self.store.count(),
                "revenue": revenue or Decimal("0.00"),
            },
            "by_status": by_status,
            "by_court": [
                {"court": row["court__name"], "count": row["count"], "revenue": row["revenue"]}
                for row in by_court
            ],
            "by_weekday": [
                {"weekday": WEEKDAYS[row["weekday"] - 1], "count": row["count"]}
                for row in by_weekday
            ],
        }
