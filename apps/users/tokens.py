"""JWT issuance with role claims."""

from __future__ import annotations

from rest_framework_simplejwt.tokens import RefreshToken  # type: ignore


class CondoRefreshToken(RefreshToken):
    """Refresh token whose access tokens carry roles and identity claims."""

    @classmethod
    def for_user(cls, user):  # type: ignore
        token = super().for_user(user)
        token["roles"] = user.roles
        token["username"] = user.username
        token["email"] = user.email
        token["full_name"] = user.full_name
        return token


def tokens_for_user(user) -> dict[str, str]:
    refresh = CondoRefreshToken.for_user(user)
    return {"refresh": str(refresh), "access": str(refresh.access_token)}
