"""DRF authentication backed by the club identity provider."""

from __future__ import annotations

from rest_framework_simplejwt.authentication import JWTAuthentication  # type: ignore

from shared.api.exceptions import AuthError

from .identity import identity_from_token, verify_access_token


class ClubJWTAuthentication(JWTAuthentication):
    """Bearer-token authentication that also checks the email claim.

    A token issued before the member changed email no longer identifies the
    owner of their bookings, so it is rejected.
    """

    def get_validated_token(self, raw_token):  # type: ignore
        return verify_access_token(raw_token)

    def get_user(self, validated_token):  # type: ignore
        identity = identity_from_token(validated_token)
        user = super().get_user(validated_token)
        if user.email.lower() != identity.email:
            raise AuthError("Token does not match the account.")
        return user
