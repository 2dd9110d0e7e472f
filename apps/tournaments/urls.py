from rest_framework.routers import SimpleRouter  # type: ignore

from .views import TournamentViewSet

router = SimpleRouter()
router.register(r"", TournamentViewSet, basename="tournament")

urlpatterns = router.urls
