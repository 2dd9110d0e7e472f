"""URL configuration for the padel club project.

The `urlpatterns` list routes URLs to views. It includes the Django admin,
the service endpoints (root, health) and the DRF routers provided by each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import include, path  # type: ignore
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView  # type: ignore

from .views import api_root, healthz

handler404 = "shared.api.handlers.not_found_view"
handler500 = "shared.api.handlers.server_error_view"

urlpatterns = [
    path("", api_root, name="api-root"),
    path("health/", healthz, name="health"),
    path("admin/", admin.site.urls),
    # Club data (default database)
    path("api/users/", include("apps.users.urls")),
    path("api/bookings/", include("apps.bookings.urls")),
    path("api/courts/", include("apps.courts.urls")),
    path("api/tournaments/", include("apps.tournaments.urls")),
    # Static catalog (catalog database)
    path("api/", include("apps.catalog.urls")),
    # API docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
]
