"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "booking_code",
        "court",
        "player_name",
        "owner_email",
        "start_time",
        "duration_hours",
        "status",
        "price",
    )
    list_filter = ("status", "court")
    search_fields = ("booking_code", "player_name", "owner_email")
    date_hierarchy = "start_time"
    readonly_fields = ("booking_code", "price", "created_at", "updated_at")
    list_select_related = ("court",)
