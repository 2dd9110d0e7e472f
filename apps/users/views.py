"""User API views: member directory, registration, login and profile."""

from __future__ import annotations

import structlog
from django.contrib.auth import get_user_model  # type: ignore
from django.db.models import Count  # type: ignore
from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from shared.api.responses import success_response

from .auth_serializers import LoginSerializer, RegisterSerializer
from .filters import UserFilterSet
from .identity import issue_tokens
from .serializers import MemberCreateSerializer, UserSerializer

User = get_user_model()

logger = structlog.get_logger(__name__)


class UserViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Club members.

    - `register` and `login` are open and return a JWT pair
    - `profile` and `logout` need a valid token
    - the directory (list/retrieve/stats) is public, adding members without
      credentials is reserved to staff
    """

    queryset = User.objects.all()
    serializer_class = UserSerializer
    filterset_class = UserFilterSet
    lookup_value_regex = r"\d+"

    def get_permissions(self):  # type: ignore
        if self.action in {"register", "login", "list", "retrieve", "levels"}:
            return [permissions.AllowAny()]
        if self.action in {"profile", "logout"}:
            return [permissions.IsAuthenticated()]
        return [permissions.IsAdminUser()]

    def get_queryset(self):  # type: ignore
        qs = super().get_queryset()
        if self.action == "list" and "active" not in self.request.query_params:
            qs = qs.filter(is_active=True)
        return qs

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        return success_response(self.get_serializer(self.get_object()).data)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = MemberCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("users.member_created", user_id=user.pk, created_by=request.user.pk)
        return success_response(
            UserSerializer(user).data,
            message="Member created.",
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["post"], authentication_classes=[])
    def register(self, request):
        """Register a member and log them in."""
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info("users.registered", user_id=user.pk, level=user.level)
        return success_response(
            {"user": UserSerializer(user).data, "tokens": issue_tokens(user)},
            message="Registration successful.",
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["post"], authentication_classes=[])
    def login(self, request):
        serializer = LoginSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        user.touch_last_access()
        logger.info("users.logged_in", user_id=user.pk)
        return success_response(
            {"user": UserSerializer(user).data, "tokens": issue_tokens(user)},
            message="Login successful.",
        )

    @action(detail=False, methods=["get"])
    def profile(self, request):
        """Profile of the authenticated member."""
        return success_response(UserSerializer(request.user).data)

    @action(detail=False, methods=["post"])
    def logout(self, request):
        # Tokens are stateless; the client discards them.
        return success_response(None, message="Logout successful.")

    @action(detail=False, methods=["get"], url_path="stats/levels")
    def levels(self, request):
        """Member counts per level, with the members of each level."""
        counts = (
            User.objects.values("level")
            .annotate(count=Count("id"))
            .order_by("-count", "level")
        )
        by_level = []
        for row in counts:
            members = User.objects.filter(level=row["level"]).values("name", "email", "date_joined")
            by_level.append({"level": row["level"], "count": row["count"], "members": list(members)})
        return success_response(
            {
                "total_active_users": User.objects.filter(is_active=True).count(),
                "by_level": by_level,
            }
        )
