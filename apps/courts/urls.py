"""URL routes for the court API."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter  # type: ignore

from .views import CourtViewSet

router = SimpleRouter()
router.register(r"", CourtViewSet, basename="court")

urlpatterns = router.urls
