"""Role permissions backed by the per-request Principal."""

from __future__ import annotations

from rest_framework import permissions  # type: ignore

from .access import Principal


class IsOwner(permissions.BasePermission):
    """Only condo owners (OWNER role claim)."""

    message = "Owner role is required."

    def has_permission(self, request, view) -> bool:  # type: ignore
        return Principal.from_request(request).is_owner


class IsFrontDesk(permissions.BasePermission):
    """Only front-desk accounts (FRONTDESK role claim)."""

    message = "Front desk role is required."

    def has_permission(self, request, view) -> bool:  # type: ignore
        return Principal.from_request(request).is_front_desk
