from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from apps.bookings.domain.availability import (
    check_availability,
    coerce_duration,
    day_schedule,
    slots_overlap,
)
from shared.api.exceptions import ValidationError
from shared.domain.value_objects import TimeSlot

MADRID = ZoneInfo("Europe/Madrid")


@dataclass
class FakeBooking:
    court_name: str
    start_time: datetime
    duration_hours: Decimal
    status: str = "confirmed"


def at(hour, minute=0, day=4):
    return datetime(2030, 5, day, hour, minute, tzinfo=MADRID)


@pytest.fixture
def central_booking():
    return FakeBooking("Central", at(10), Decimal("1"))


@pytest.mark.parametrize(
    "start, expected",
    [
        (at(10, 30), False),
        (at(11), True),
        (at(9), True),
    ],
)
def test_central_scenario(central_booking, start, expected):
    result = check_availability("Central", start, 1, [central_booking])

    assert result.available is expected
    if not expected:
        assert result.conflicts == (central_booking,)


def test_overlap_is_reported_whichever_interval_is_queried(central_booking):
    # requested slot wraps the existing one, then sits inside it
    assert not check_availability("Central", at(9), 3, [central_booking]).available
    assert not check_availability("Central", at(10, 15), "0.5", [central_booking]).available


def test_adjacent_slots_never_overlap():
    first = TimeSlot(at(10), at(11))
    second = TimeSlot(at(11), at(12))

    assert not slots_overlap(first, second)
    assert not slots_overlap(second, first)


def test_cancelled_and_other_court_bookings_do_not_block(central_booking):
    cancelled = FakeBooking("Central", at(10), Decimal("1"), status="cancelled")
    elsewhere = FakeBooking("Norte", at(10), Decimal("1"))

    result = check_availability("Central", at(10), 1, [cancelled, elsewhere])

    assert result.available
    assert result.conflict_count == 0


def test_all_conflicts_are_returned():
    morning = FakeBooking("Central", at(10), Decimal("1"), status="pending")
    later = FakeBooking("Central", at(11), Decimal("1.5"))

    result = check_availability("central", at(10, 30), 2, [morning, later])

    assert not result.available
    assert result.conflict_count == 2


@pytest.mark.parametrize("duration", [0, -1, "0", "abc", None, "NaN", "1e10", 25, "24.01"])
def test_invalid_duration_fails_validation(central_booking, duration):
    with pytest.raises(ValidationError):
        check_availability("Central", at(12), duration, [central_booking])


def test_missing_court_or_start_fails_validation():
    with pytest.raises(ValidationError):
        check_availability("", at(12), 1, [])
    with pytest.raises(ValidationError):
        check_availability("Central", None, 1, [])


def test_past_start_only_rejected_when_now_given():
    now = at(12)

    with pytest.raises(ValidationError):
        check_availability("Central", at(11), 1, [], now=now)
    assert check_availability("Central", at(11), 1, []).available


def test_coerce_duration_accepts_numeric_strings():
    assert coerce_duration("1.5") == Decimal("1.5")
    assert coerce_duration(2) == Decimal("2")
    assert coerce_duration("24") == Decimal("24")


@pytest.mark.parametrize("start", ["0001-01-01T00:30:00", "9999-12-31T23:30:00+00:00"])
def test_start_at_the_edge_of_the_calendar_fails_validation(start):
    with pytest.raises(ValidationError):
        check_availability("Central", start, 1, [])


def test_day_schedule_marks_booked_and_past_slots():
    booked = FakeBooking("Central", at(10), Decimal("1.5"))
    slots = day_schedule(
        "Central",
        date(2030, 5, 4),
        [booked],
        opening_hour=8,
        closing_hour=23,
        now=at(9, 30),
        tz=MADRID,
    )
    by_hour = {slot.start.hour: slot.available for slot in slots}

    assert len(slots) == 15
    assert by_hour[8] is False  # already started
    assert by_hour[9] is False
    assert by_hour[10] is False
    assert by_hour[11] is False  # booking runs until 11:30
    assert by_hour[12] is True
    assert slots[-1].end == at(23)


def test_day_schedule_sees_bookings_from_previous_evening():
    late = FakeBooking("Sur", at(22, day=3), Decimal("12"))
    slots = day_schedule(
        "Sur",
        date(2030, 5, 4),
        [late],
        opening_hour=8,
        closing_hour=12,
        now=at(0, day=1),
        tz=MADRID,
    )

    assert [slot.available for slot in slots] == [False, False, True, True]
