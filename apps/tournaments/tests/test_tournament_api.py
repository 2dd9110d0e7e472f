from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from apps.tournaments.models import Tournament


def make_tournament(name, days_ahead, status=Tournament.Status.OPEN, category="mixed"):
    start = timezone.localdate() + timedelta(days=days_ahead)
    return Tournament.objects.create(
        name=name,
        category=category,
        status=status,
        start_date=start,
        end_date=start + timedelta(days=2),
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.mark.django_db
def test_list_is_sorted_by_start_date_and_paginated(api_client):
    make_tournament("Summer Cup", 30)
    make_tournament("Spring Open", 5)

    response = api_client.get(reverse("tournament-list"))

    assert response.status_code == 200
    assert [t["name"] for t in response.data["data"]] == ["Spring Open", "Summer Cup"]
    assert response.data["pagination"]["total"] == 2


@pytest.mark.django_db
def test_list_filters_by_status_and_category(api_client):
    make_tournament("Closed", 5, status=Tournament.Status.FINISHED)
    make_tournament("Ladies", 6, category="women")
    make_tournament("Mixed", 7)

    by_status = api_client.get(reverse("tournament-list"), {"status": "finished"})
    by_category = api_client.get(reverse("tournament-list"), {"category": "Women"})

    assert [t["name"] for t in by_status.data["data"]] == ["Closed"]
    assert [t["name"] for t in by_category.data["data"]] == ["Ladies"]


@pytest.mark.django_db
def test_upcoming_returns_next_five_open_or_scheduled(api_client):
    make_tournament("Past", -10)
    make_tournament("Cancelled", 1, status=Tournament.Status.CANCELLED)
    for days in range(2, 9):
        make_tournament(f"T{days}", days, status=Tournament.Status.SCHEDULED)

    response = api_client.get(reverse("tournament-upcoming"))

    assert response.status_code == 200
    assert [t["name"] for t in response.data["data"]] == ["T2", "T3", "T4", "T5", "T6"]


@pytest.mark.django_db
def test_retrieve_unknown_tournament(api_client):
    response = api_client.get(reverse("tournament-detail", args=[404]))

    assert response.status_code == 404
    assert response.data["success"] is False
