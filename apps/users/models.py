"""User domain models for the padel club.

Club members log in with their email. Besides the credentials the profile
keeps the playing level and the player's preferences, which the club uses
to build tournament categories and suggest partners.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


PHONE_VALIDATOR = RegexValidator(
    regex=r"^\+?\d{7,15}$",
    message=_("Invalid phone number. Use digits only, optionally prefixed with +."),
)


class UserManager(BaseUserManager):
    """Manager that uses the (lower-cased) email as the login."""

    use_in_migrations = True

    def normalize_email(self, email: str | None) -> str:  # type: ignore[override]
        return super().normalize_email(email or "").strip().lower()

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        email = self.normalize_email(email)

        phone = extra_fields.get("phone")
        if phone:
            extra_fields["phone"] = self.normalize_phone(phone)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)

    def get_by_natural_key(self, username):  # type: ignore[override]
        return self.get(email__iexact=username)

    @staticmethod
    def normalize_phone(phone: str) -> str:
        """Strip spaces and dashes so phones are stored uniformly."""
        return phone.replace(" ", "").replace("-", "")


class User(AbstractUser):
    """Club member."""

    class Level(models.TextChoices):
        BEGINNER = "beginner", _("Beginner")
        INTERMEDIATE = "intermediate", _("Intermediate")
        ADVANCED = "advanced", _("Advanced")
        PROFESSIONAL = "professional", _("Professional")

    class Position(models.TextChoices):
        RIGHT = "right", _("Right side")
        LEFT = "left", _("Left side")

    class Schedule(models.TextChoices):
        MORNING = "morning", _("Morning")
        AFTERNOON = "afternoon", _("Afternoon")
        EVENING = "evening", _("Evening")

    username = None
    first_name = None
    last_name = None

    name = models.CharField(_("Name"), max_length=150)
    email = models.EmailField(_("Email"), unique=True)
    phone = models.CharField(_("Phone"), max_length=20, blank=True, validators=[PHONE_VALIDATOR])
    level = models.CharField(
        _("Level"),
        max_length=20,
        choices=Level.choices,
        default=Level.BEGINNER,
    )
    preferred_position = models.CharField(
        max_length=10,
        choices=Position.choices,
        default=Position.RIGHT,
    )
    preferred_schedule = models.CharField(
        max_length=10,
        choices=Schedule.choices,
        default=Schedule.AFTERNOON,
    )
    last_access_at = models.DateTimeField(_("Last access"), null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-date_joined"]
        indexes = [
            models.Index(fields=["level"], name="users_user_level_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"

    def get_full_name(self) -> str:
        return self.name

    def get_short_name(self) -> str:
        return self.name

    def touch_last_access(self) -> None:
        self.last_access_at = timezone.now()
        self.save(update_fields=["last_access_at"])
