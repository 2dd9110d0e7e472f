"""JWT identity provider.

Tokens are SimpleJWT access tokens carrying the member's email and name as
extra claims, so services can authorise on the email without another query.
"""

from __future__ import annotations

from dataclasses import dataclass

from rest_framework_simplejwt.exceptions import TokenError  # type: ignore
from rest_framework_simplejwt.settings import api_settings as jwt_settings  # type: ignore
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken  # type: ignore

from shared.api.exceptions import AuthError


@dataclass(frozen=True)
class Identity:
    """Who is making the request: the user id and the email that owns bookings."""

    id: int
    email: str
    name: str = ""

    @classmethod
    def from_user(cls, user) -> "Identity":
        if user is None or not user.is_authenticated:
            raise AuthError("Authentication required.")
        return cls(id=user.pk, email=user.email.lower(), name=user.name)


def issue_tokens(user) -> dict[str, str]:
    refresh = RefreshToken.for_user(user)
    refresh["email"] = user.email
    refresh["name"] = user.name
    return {"refresh": str(refresh), "access": str(refresh.access_token)}


def verify_access_token(raw_token) -> AccessToken:
    try:
        return AccessToken(raw_token)
    except TokenError as exc:
        raise AuthError("Invalid or expired token.") from exc


def identity_from_token(token: AccessToken) -> Identity:
    user_id = token.get(jwt_settings.USER_ID_CLAIM)
    email = token.get("email")
    if user_id is None or not email:
        raise AuthError("Token does not identify a member.")
    return Identity(id=int(user_id), email=str(email).lower(), name=str(token.get("name", "")))


def verify_token(raw_token) -> Identity:
    """Validate a raw access token and return the identity it carries."""
    return identity_from_token(verify_access_token(raw_token))
