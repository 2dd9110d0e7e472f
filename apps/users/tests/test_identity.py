import pytest

from apps.users.identity import Identity, issue_tokens, verify_token
from apps.users.models import User
from shared.api.exceptions import AuthError


@pytest.mark.django_db
def test_verify_token_returns_identity_with_email():
    user = User.objects.create_user(email="Marta@Example.com", password="secret123", name="Marta")
    tokens = issue_tokens(user)

    identity = verify_token(tokens["access"])

    assert identity == Identity(id=user.pk, email="marta@example.com", name="Marta")


def test_verify_token_rejects_tampered_token():
    with pytest.raises(AuthError) as excinfo:
        verify_token("eyJhbGciOiJIUzI1NiJ9.e30.invalid")

    assert excinfo.value.status_code == 401


def test_from_user_requires_authenticated_user():
    class Anonymous:
        is_authenticated = False

    with pytest.raises(AuthError):
        Identity.from_user(Anonymous())
