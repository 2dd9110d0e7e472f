"""Serializers for courts and their availability."""

from __future__ import annotations

from datetime import date, timedelta

from rest_framework import serializers  # type: ignore

from .models import Court


class CourtSerializer(serializers.ModelSerializer):
    class Meta:
        model = Court
        fields = [
            "id",
            "name",
            "court_type",
            "is_covered",
            "hourly_price",
            "is_active",
            "description",
        ]
        read_only_fields = fields


class AvailabilityQuerySerializer(serializers.Serializer):
    """Query string of the availability endpoint.

    Only the shape is checked here; the availability checker owns the
    semantic validation (positive duration and so on).
    """

    date = serializers.CharField(required=False, allow_blank=True)
    duration = serializers.CharField(required=False, default="1")


class ScheduleQuerySerializer(serializers.Serializer):
    date = serializers.DateField()

    def validate_date(self, value):
        # the grid also looks at the neighbouring days
        if not date.min + timedelta(days=2) < value < date.max - timedelta(days=2):
            raise serializers.ValidationError("Date is out of range.")
        return value
