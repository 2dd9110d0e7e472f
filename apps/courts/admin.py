"""Admin registration for courts."""

from __future__ import annotations

from django.contrib import admin

from .models import Court


@admin.register(Court)
class CourtAdmin(admin.ModelAdmin):
    list_display = ("name", "court_type", "is_covered", "hourly_price", "is_active")
    list_filter = ("court_type", "is_covered", "is_active")
    search_fields = ("name",)
