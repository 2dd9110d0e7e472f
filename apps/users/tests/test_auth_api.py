"""API tests for registration, login and the member directory."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class AuthAPITests(APITestCase):
    def test_register_returns_tokens(self) -> None:
        payload = {
            "name": "Lucia Perez",
            "email": "Lucia@Example.com",
            "password": "secret123",
            "level": User.Level.INTERMEDIATE,
        }

        response = self.client.post(reverse("user-register"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["success"])
        self.assertIn("access", response.data["data"]["tokens"])
        self.assertEqual(response.data["data"]["user"]["email"], "lucia@example.com")
        user = User.objects.get(email="lucia@example.com")
        self.assertIsNotNone(user.last_access_at)

    def test_register_rejects_duplicate_email(self) -> None:
        User.objects.create_user(email="taken@example.com", password="secret123", name="Taken")

        response = self.client.post(
            reverse("user-register"),
            {"name": "Other", "email": "TAKEN@example.com", "password": "secret123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "validation_error")
        self.assertIn("email", response.data["details"])

    def test_register_requires_long_enough_password(self) -> None:
        response = self.client.post(
            reverse("user-register"),
            {"name": "Short", "email": "short@example.com", "password": "123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(User.objects.filter(email="short@example.com").exists())

    def test_login_with_wrong_password_is_unauthorized(self) -> None:
        User.objects.create_user(email="player@example.com", password="secret123", name="Player")

        response = self.client.post(
            reverse("user-login"),
            {"email": "player@example.com", "password": "wrong-one"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "auth_error")

    def test_login_then_profile_with_bearer_token(self) -> None:
        User.objects.create_user(email="player@example.com", password="secret123", name="Player")

        login = self.client.post(
            reverse("user-login"),
            {"email": "PLAYER@example.com", "password": "secret123"},
            format="json",
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK, login.data)
        access = login.data["data"]["tokens"]["access"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        profile = self.client.get(reverse("user-profile"))

        self.assertEqual(profile.status_code, status.HTTP_200_OK)
        self.assertEqual(profile.data["data"]["email"], "player@example.com")

    def test_profile_requires_token(self) -> None:
        response = self.client.get(reverse("user-profile"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data["success"])

    def test_profile_rejects_garbage_token(self) -> None:
        self.client.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")

        response = self.client.get(reverse("user-profile"))

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"], "auth_error")


class MemberDirectoryAPITests(APITestCase):
    def setUp(self) -> None:
        self.ana = User.objects.create_user(
            email="ana@example.com", password="secret123", name="Ana", level=User.Level.ADVANCED
        )
        self.bea = User.objects.create_user(
            email="bea@example.com", password="secret123", name="Bea", level=User.Level.ADVANCED
        )
        self.carl = User.objects.create_user(
            email="carl@example.com", password="secret123", name="Carl", is_active=False
        )

    def test_list_hides_inactive_members_by_default(self) -> None:
        response = self.client.get(reverse("user-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        emails = {row["email"] for row in response.data["data"]}
        self.assertEqual(emails, {"ana@example.com", "bea@example.com"})
        self.assertEqual(response.data["pagination"]["total"], 2)

    def test_list_filters_by_level(self) -> None:
        response = self.client.get(reverse("user-list"), {"level": User.Level.ADVANCED})

        self.assertEqual(len(response.data["data"]), 2)

    def test_level_stats(self) -> None:
        response = self.client.get(reverse("user-levels"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data["data"]
        self.assertEqual(data["total_active_users"], 2)
        self.assertEqual(data["by_level"][0]["level"], User.Level.ADVANCED)
        self.assertEqual(data["by_level"][0]["count"], 2)

    def test_retrieve_unknown_member_is_404(self) -> None:
        response = self.client.get(reverse("user-detail", args=[9999]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "not_found")

    def test_only_staff_can_add_members_without_password(self) -> None:
        payload = {"name": "Dani", "email": "dani@example.com", "phone": "+34600111222"}
        self.client.force_authenticate(self.ana)

        forbidden = self.client.post(reverse("user-list"), payload, format="json")
        self.assertEqual(forbidden.status_code, status.HTTP_403_FORBIDDEN)

        staff = User.objects.create_superuser(email="admin@example.com", password="secret123", name="Admin")
        self.client.force_authenticate(staff)
        created = self.client.post(reverse("user-list"), payload, format="json")
        self.assertEqual(created.status_code, status.HTTP_201_CREATED, created.data)
        self.assertFalse(User.objects.get(email="dani@example.com").has_usable_password())

        duplicate = self.client.post(reverse("user-list"), payload, format="json")
        self.assertEqual(duplicate.status_code, status.HTTP_409_CONFLICT)


class PhoneNormalisationTests(APITestCase):
    def test_register_accepts_spaced_phone_and_stores_digits(self) -> None:
        response = self.client.post(
            reverse("user-register"),
            {"name": "Pepe", "email": "pepe@example.com", "password": "secret123", "phone": "600 123-456"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(User.objects.get(email="pepe@example.com").phone, "600123456")

    def test_register_rejects_letters_in_phone(self) -> None:
        response = self.client.post(
            reverse("user-register"),
            {"name": "Pepe", "email": "pepe@example.com", "password": "secret123", "phone": "call me"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("phone", response.data["details"])
