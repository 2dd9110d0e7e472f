"""Serializers for the booking API."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    court = serializers.CharField(source="court.name", read_only=True)
    end_time = serializers.DateTimeField(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "booking_code",
            "court",
            "player_name",
            "owner_email",
            "start_time",
            "end_time",
            "duration_hours",
            "status",
            "price",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class BookingCreateSerializer(serializers.Serializer):
    """Input for a new booking.

    Duration and start are only type-checked here; positivity and the
    "not in the past" rule are enforced by the availability checker.
    """

    court = serializers.CharField(max_length=50)
    start_time = serializers.DateTimeField()
    duration_hours = serializers.DecimalField(max_digits=4, decimal_places=2)
    player_name = serializers.CharField(max_length=150, required=False, allow_blank=True)


class BookingUpdateSerializer(serializers.Serializer):
    court = serializers.CharField(max_length=50, required=False)
    start_time = serializers.DateTimeField(required=False)
    duration_hours = serializers.DecimalField(max_digits=4, decimal_places=2, required=False)
    status = serializers.ChoiceField(choices=Booking.Status.choices, required=False)
