"""Admin registrations for the users domain."""

from __future__ import annotations

from django.contrib import admin

from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "phone", "level", "is_active", "is_staff", "date_joined")
    list_filter = ("level", "is_active", "is_staff")
    search_fields = ("email", "name", "phone")
    ordering = ("email",)
    readonly_fields = ("date_joined", "last_login", "last_access_at", "updated_at")
    exclude = ("password",)
