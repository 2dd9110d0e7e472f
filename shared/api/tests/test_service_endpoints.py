import pytest
from django.test import override_settings

from shared.api.exceptions import AuthError, ConflictError
from shared.api.handlers import api_exception_handler


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/does-not-exist/")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "not_found"


def test_root_describes_api(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "/api/bookings/" in response.json()["endpoints"]["dynamic"]


@pytest.mark.django_db(databases=["default", "catalog"])
def test_health_pings_both_databases(client):
    response = client.get("/health/")

    assert response.status_code == 200
    assert response.json()["services"] == {"default": "connected", "catalog": "connected"}


def test_request_id_is_echoed(client):
    response = client.get("/", HTTP_X_REQUEST_ID="abc123")

    assert response["X-Request-ID"] == "abc123"


def test_api_errors_are_wrapped():
    response = api_exception_handler(
        ConflictError("Slot taken.", details={"conflicts": []}),
        {"view": None},
    )

    assert response.status_code == 409
    assert response.data == {
        "success": False,
        "error": "conflict",
        "message": "Slot taken.",
        "details": {"conflicts": []},
    }


def test_forbidden_auth_error_keeps_code():
    response = api_exception_handler(AuthError.forbidden("Not yours."), {"view": None})

    assert response.status_code == 403
    assert response.data["error"] == "auth_error"


@override_settings(DEBUG=False)
def test_unexpected_errors_are_hidden():
    response = api_exception_handler(RuntimeError("db password is hunter2"), {"view": None})

    assert response.status_code == 500
    assert response.data["error"] == "internal_error"
    assert "hunter2" not in response.data["message"]
