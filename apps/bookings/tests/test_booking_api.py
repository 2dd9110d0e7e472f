"""Integration tests for booking API endpoints."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.courts.models import Court
from apps.users.models import User


def future(hour: int, minute: int = 0, days: int = 3) -> datetime:
    return (timezone.localtime() + timedelta(days=days)).replace(
        hour=hour, minute=minute, second=0, microsecond=0
    )


class BookingAPITests(APITestCase):
    """Covers creation, conflicts, ownership and cancellation of bookings."""

    def setUp(self) -> None:
        self.owner = User.objects.create_user(email="owner@example.com", password="secret123", name="Owner")
        self.other = User.objects.create_user(email="other@example.com", password="secret123", name="Other")
        self.central = Court.objects.get(name="Central")
        self.norte = Court.objects.get(name="Norte")
        self.list_url = reverse("booking-list")

    def _book(self, start, duration="1", court=None, status_value=Booking.Status.CONFIRMED, owner="owner@example.com"):
        court = court or self.central
        return Booking.objects.create(
            court=court,
            player_name="Existing",
            owner_email=owner,
            start_time=start,
            duration_hours=Decimal(duration),
            status=status_value,
            price=court.price_for(duration).amount,
        )

    def _payload(self, start, duration="1.5", court="Central") -> dict:
        return {
            "court": court,
            "start_time": start.isoformat(),
            "duration_hours": duration,
            "player_name": "Lucia",
        }

    def test_member_can_create_booking(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.list_url, self._payload(future(10)), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        data = response.data["data"]
        self.assertEqual(data["status"], Booking.Status.PENDING)
        self.assertEqual(data["price"], "37.50")
        self.assertEqual(data["owner_email"], "owner@example.com")
        self.assertEqual(data["court"], "Central")
        self.assertEqual(len(data["booking_code"]), 8)

    def test_player_name_defaults_to_member_name(self) -> None:
        self.client.force_authenticate(self.owner)
        payload = self._payload(future(10))
        del payload["player_name"]

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["data"]["player_name"], "Owner")

    def test_anonymous_cannot_create(self) -> None:
        response = self.client.post(self.list_url, self._payload(future(10)), format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(Booking.objects.exists())

    def test_start_in_past_is_rejected_without_mutation(self) -> None:
        self.client.force_authenticate(self.owner)
        start = timezone.localtime() - timedelta(hours=2)

        response = self.client.post(self.list_url, self._payload(start), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "validation_error")
        self.assertFalse(Booking.objects.exists())

    def test_non_positive_duration_is_validation_error(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.list_url, self._payload(future(10), duration="0"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "validation_error")

    def test_unknown_court_is_not_found(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.list_url, self._payload(future(10), court="Este"), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_overlapping_booking_is_conflict(self) -> None:
        existing = self._book(future(10))
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.list_url, self._payload(future(10, 30), duration="1"), format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["error"], "conflict")
        conflicts = response.data["details"]["conflicts"]
        self.assertEqual([c["id"] for c in conflicts], [existing.pk])
        self.assertEqual(Booking.objects.count(), 1)

    def test_adjacent_and_cancelled_bookings_do_not_block(self) -> None:
        self._book(future(10))
        self._book(future(11), status_value=Booking.Status.CANCELLED)
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.list_url, self._payload(future(11), duration="1"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_same_slot_on_another_court_is_free(self) -> None:
        self._book(future(10))
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.list_url, self._payload(future(10), court="norte"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["data"]["price"], "30.00")

    def test_non_owner_cannot_update_or_delete(self) -> None:
        booking = self._book(future(10))
        self.client.force_authenticate(self.other)
        url = reverse("booking-detail", args=[booking.pk])

        update = self.client.patch(url, {"status": Booking.Status.CANCELLED}, format="json")
        delete = self.client.delete(url)

        self.assertEqual(update.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(update.data["error"], "auth_error")
        self.assertEqual(delete.status_code, status.HTTP_403_FORBIDDEN)
        booking.refresh_from_db()
        self.assertEqual(booking.status, Booking.Status.CONFIRMED)

    def test_owner_update_reprices_on_duration_change(self) -> None:
        booking = self._book(future(10))
        self.client.force_authenticate(self.owner)

        response = self.client.patch(
            reverse("booking-detail", args=[booking.pk]),
            {"duration_hours": "2"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        booking.refresh_from_db()
        self.assertEqual(booking.duration_hours, Decimal("2.00"))
        self.assertEqual(booking.price, Decimal("50.00"))

    def test_update_ignores_own_slot_but_not_others(self) -> None:
        booking = self._book(future(10))
        self._book(future(12), owner="other@example.com")
        self.client.force_authenticate(self.owner)
        url = reverse("booking-detail", args=[booking.pk])

        shift = self.client.patch(url, {"start_time": future(10, 30).isoformat()}, format="json")
        self.assertEqual(shift.status_code, status.HTTP_200_OK, shift.data)

        clash = self.client.patch(url, {"duration_hours": "2"}, format="json")
        self.assertEqual(clash.status_code, status.HTTP_409_CONFLICT)
        booking.refresh_from_db()
        self.assertEqual(booking.duration_hours, Decimal("1.00"))

    def test_update_rejects_unknown_status(self) -> None:
        booking = self._book(future(10))
        self.client.force_authenticate(self.owner)

        response = self.client.patch(
            reverse("booking-detail", args=[booking.pk]),
            {"status": "finished"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_owner_can_delete(self) -> None:
        booking = self._book(future(10))
        self.client.force_authenticate(self.owner)

        response = self.client.delete(reverse("booking-detail", args=[booking.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["id"], booking.pk)
        self.assertFalse(Booking.objects.filter(pk=booking.pk).exists())

    def test_missing_booking_is_not_found(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.delete(reverse("booking-detail", args=[9999]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_filters_and_paginates(self) -> None:
        self._book(future(9))
        self._book(future(12), court=self.norte)
        self._book(future(18), status_value=Booking.Status.CANCELLED)

        response = self.client.get(self.list_url, {"court": "cen", "limit": 1})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["pagination"]["total"], 2)
        self.assertEqual(response.data["pagination"]["pages"], 2)
        self.assertEqual(len(response.data["data"]), 1)

        cancelled = self.client.get(self.list_url, {"status": Booking.Status.CANCELLED})
        self.assertEqual(cancelled.data["pagination"]["total"], 1)

    def test_dashboard_groups_bookings(self) -> None:
        self._book(future(9))
        self._book(future(12))
        self._book(future(12), court=self.norte, status_value=Booking.Status.CANCELLED)

        response = self.client.get(reverse("booking-dashboard"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["totals"]["count"], 3)
        self.assertEqual(data["totals"]["revenue"], Decimal("70.00"))
        self.assertEqual(data["by_court"][0]["court"], "Central")
        self.assertEqual(data["by_court"][0]["count"], 2)
        self.assertEqual(sum(row["count"] for row in data["by_weekday"]), 3)

    def test_duration_longer_than_a_day_is_rejected(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(self.list_url, self._payload(future(10), duration="30"), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "validation_error")
        self.assertFalse(Booking.objects.exists())

    def test_cannot_move_booking_to_inactive_court(self) -> None:
        booking = self._book(future(10))
        Court.objects.filter(name="Sur").update(is_active=False)
        self.client.force_authenticate(self.owner)

        response = self.client.patch(
            reverse("booking-detail", args=[booking.pk]),
            {"court": "Sur"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["details"], {"court": "inactive"})
        booking.refresh_from_db()
        self.assertEqual(booking.court, self.central)
