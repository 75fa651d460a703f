"""URL routing for condos."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import CondoViewSet

router = DefaultRouter()
router.register(r"", CondoViewSet, basename="condo")

urlpatterns = [
    path("", include(router.urls)),
]
