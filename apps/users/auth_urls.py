"""URL routing for authentication endpoints (namespace: auth)."""

from __future__ import annotations

from django.urls import path  # type: ignore
from rest_framework_simplejwt.views import TokenRefreshView  # type: ignore

from .auth_views import LoginView, RegisterGuestView, RegisterOwnerView

app_name = "auth"

urlpatterns = [
    path("register/", RegisterOwnerView.as_view(), name="register"),
    path("register-guest/", RegisterGuestView.as_view(), name="register-guest"),
    path("login/", LoginView.as_view(), name="login"),
    path("token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),
]
