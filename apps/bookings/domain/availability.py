"""
Court availability

Pure decision logic, no ORM access: given a court, a requested start and a
duration, decide whether the slot collides with existing bookings. The
same overlap predicate backs the availability endpoint, booking creation,
booking updates and the daily schedule.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta
from datetime import timezone as dt_timezone
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Protocol, Sequence

from django.utils import timezone  # type: ignore
from django.utils.dateparse import parse_datetime  # type: ignore

from shared.api.exceptions import ValidationError
from shared.domain.value_objects import TimeSlot

PENDING = "pending"
CONFIRMED = "confirmed"
CANCELLED = "cancelled"

ACTIVE_STATUSES = frozenset({PENDING, CONFIRMED})

MAX_DURATION_HOURS = Decimal("24")
MAX_DURATION = timedelta(hours=int(MAX_DURATION_HOURS))


class BookedSlot(Protocol):
    """What the checker needs to know about an existing booking."""

    court_name: str
    start_time: datetime
    duration_hours: Decimal
    status: str


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    conflicts: Sequence[BookedSlot] = field(default_factory=tuple)

    @property
    def conflict_count(self) -> int:
        return len(self.conflicts)


def slots_overlap(first: TimeSlot, second: TimeSlot) -> bool:
    """Half-open overlap: [a, b) and [c, d) collide iff a < d and c < b."""
    return first.overlaps_with(second)


def coerce_duration(value) -> Decimal:
    """Turn a duration in hours into a positive Decimal or fail."""
    if value is None or isinstance(value, bool):
        raise ValidationError("Duration is required.", details={"duration_hours": "required"})
    try:
        duration = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(
            "Duration must be a number of hours.",
            details={"duration_hours": "not a number"},
        )
    if not duration.is_finite() or duration <= 0:
        raise ValidationError(
            "Duration must be greater than zero.",
            details={"duration_hours": "must be positive"},
        )
    if duration > MAX_DURATION_HOURS:
        raise ValidationError(
            f"Duration cannot exceed {MAX_DURATION_HOURS} hours.",
            details={"duration_hours": f"at most {MAX_DURATION_HOURS}"},
        )
    return duration


def _within_calendar(start: datetime) -> bool:
    """Whether `start` +- MAX_DURATION is still a representable datetime."""
    try:
        utc = start.astimezone(dt_timezone.utc)
        return start - MAX_DURATION < start + MAX_DURATION and utc - MAX_DURATION < utc + MAX_DURATION
    except OverflowError:
        return False


def parse_start(value) -> datetime:
    """Accept a datetime or an ISO 8601 string; naive values use the club's timezone."""
    if isinstance(value, datetime):
        start = value
    elif isinstance(value, str) and value.strip():
        try:
            start = parse_datetime(value.strip())
        except ValueError:
            start = None
        if start is None:
            raise ValidationError(
                "Start time must be an ISO 8601 datetime.",
                details={"start_time": "invalid format"},
            )
    else:
        raise ValidationError("Start time is required.", details={"start_time": "required"})

    if timezone.is_naive(start):
        start = timezone.make_aware(start, timezone.get_current_timezone())
    if not _within_calendar(start):
        raise ValidationError("Start time is out of range.", details={"start_time": "out of range"})
    return start


def validate_request(
    court: Optional[str],
    requested_start,
    duration_hours,
    *,
    now: Optional[datetime] = None,
) -> TimeSlot:
    """
    Validate a slot request and return the requested slot.

    `now` is only given for operations that create or move a booking;
    a start earlier than it is rejected.
    """
    if not court or not str(court).strip():
        raise ValidationError("Court is required.", details={"court": "required"})
    start = parse_start(requested_start)
    duration = coerce_duration(duration_hours)
    if now is not None and start < now:
        raise ValidationError(
            "Cannot book a slot in the past.",
            details={"start_time": "must not be in the past"},
        )
    return TimeSlot.from_duration(start, duration)


def blocks(booking: BookedSlot, court: str) -> bool:
    return booking.court_name.lower() == court.lower() and str(booking.status) in ACTIVE_STATUSES


def booked_slot(booking: BookedSlot) -> TimeSlot:
    return TimeSlot.from_duration(booking.start_time, booking.duration_hours)


def check_availability(
    court: Optional[str],
    requested_start,
    duration_hours,
    existing_bookings: Iterable[BookedSlot],
    *,
    now: Optional[datetime] = None,
) -> AvailabilityResult:
    """
    Decide whether a court is free for the requested slot.

    Every blocking booking that overlaps is reported. Bookings on other
    courts and cancelled bookings never block. Invalid input raises
    ValidationError before any comparison is made.
    """
    requested = validate_request(court, requested_start, duration_hours, now=now)
    conflicts = tuple(
        booking
        for booking in existing_bookings
        if blocks(booking, court) and slots_overlap(requested, booked_slot(booking))
    )
    return AvailabilityResult(available=not conflicts, conflicts=conflicts)


@dataclass(frozen=True)
class ScheduleSlot:
    start: datetime
    end: datetime
    available: bool

    def as_dict(self) -> dict:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "label": f"{self.start:%H:%M}",
            "available": self.available,
        }


def day_schedule(
    court: str,
    day: date,
    existing_bookings: Iterable[BookedSlot],
    *,
    opening_hour: int,
    closing_hour: int,
    now: datetime,
    tz=None,
) -> list[ScheduleSlot]:
    """Hourly slots from opening to closing time with their availability."""
    tz = tz or timezone.get_current_timezone()
    blocking = [booked_slot(b) for b in existing_bookings if blocks(b, court)]
    slots = []
    for hour in range(opening_hour, closing_hour):
        start = timezone.make_aware(datetime.combine(day, time(hour)), tz)
        slot = TimeSlot(start, start + timedelta(hours=1))
        free = start >= now and not any(slots_overlap(slot, other) for other in blocking)
        slots.append(ScheduleSlot(start=slot.start, end=slot.end, available=free))
    return slots
