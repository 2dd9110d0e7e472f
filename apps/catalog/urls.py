from rest_framework.routers import SimpleRouter  # type: ignore

from .views import ArticleViewSet, RacketViewSet

router = SimpleRouter()
router.register(r"articles", ArticleViewSet, basename="article")
router.register(r"rackets", RacketViewSet, basename="racket")

urlpatterns = router.urls
