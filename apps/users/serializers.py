"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from shared.api.exceptions import ConflictError

from .models import PHONE_VALIDATOR

User = get_user_model()


def validate_phone_number(value: str) -> str:
    """Normalise like the manager does, then check the format."""
    phone = User.objects.normalize_phone(value.strip())
    if phone:
        PHONE_VALIDATOR(phone)
    return phone


class UserSerializer(serializers.ModelSerializer):
    """Public member profile; never exposes the password hash."""

    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "phone",
            "level",
            "preferred_position",
            "preferred_schedule",
            "is_active",
            "date_joined",
            "last_access_at",
        ]
        read_only_fields = fields


class MemberCreateSerializer(serializers.ModelSerializer):
    """Front-desk registration of a member without login credentials."""

    phone = serializers.CharField()

    def validate_phone(self, value: str) -> str:
        return validate_phone_number(value)

    class Meta:
        model = User
        fields = [
            "name",
            "email",
            "phone",
            "level",
            "preferred_position",
            "preferred_schedule",
        ]
        extra_kwargs = {
            # Uniqueness is reported as a 409 in create().
            "email": {"validators": []},
        }

    def create(self, validated_data):  # type: ignore
        email = validated_data.pop("email").strip().lower()
        if User.objects.filter(email__iexact=email).exists():
            raise ConflictError("A member with this email already exists.")
        return User.objects.create_user(email=email, password=None, **validated_data)
