from django.contrib import admin

from .models import Tournament


@admin.register(Tournament)
class TournamentAdmin(admin.ModelAdmin):
    list_display = ("name", "category", "status", "start_date", "end_date", "max_teams", "entry_fee")
    list_filter = ("status", "category")
    search_fields = ("name", "category")
    date_hierarchy = "start_date"
