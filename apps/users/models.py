"""User domain models for CondoSystem.

The platform distinguishes three roles: condo owners who create condos
and approve bookings, front-desk accounts bound one-to-one to a single
condo, and registered guests. Logins may use either the username or the
email address.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, UserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CustomUserManager(UserManager):
    """User manager that defaults the role and resolves logins."""

    use_in_migrations = True

    def create_user(self, username: str, email: str | None = None, password: str | None = None, **extra_fields: Any):
        if not email:
            raise ValueError("Email is required to create a user.")
        extra_fields.setdefault("role", CustomUser.Role.GUEST)
        return super().create_user(username, email, password, **extra_fields)

    def create_superuser(self, username: str, email: str | None = None, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("role", CustomUser.Role.OWNER)
        return super().create_superuser(username, email, password, **extra_fields)

    def find_by_login(self, login: str):
        """Find a user by email (case-insensitive) or exact username."""
        if not login:
            return None
        return self.filter(models.Q(email__iexact=login) | models.Q(username=login)).order_by("pk").first()


class CustomUser(AbstractUser):
    """Platform user: condo owner, front desk or guest."""

    class Role(models.TextChoices):
        OWNER = "OWNER", _("Owner")
        FRONTDESK = "FRONTDESK", _("Front desk")
        GUEST = "Guest", _("Guest")

    email = models.EmailField(_("Email"), unique=True)
    full_name = models.CharField(_("Full name"), max_length=255, blank=True)
    role = models.CharField(
        _("Role"),
        max_length=20,
        choices=Role.choices,
        default=Role.GUEST,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CustomUserManager()

    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.username} ({self.get_role_display()})"

    # --- Domain helpers -------------------------------------------------------
    def is_owner(self) -> bool:
        return self.role == self.Role.OWNER

    def is_front_desk(self) -> bool:
        return self.role == self.Role.FRONTDESK

    def is_guest(self) -> bool:
        return self.role == self.Role.GUEST

    @property
    def roles(self) -> list[str]:
        return [self.role]


# Shorter import name for the user model.
User = CustomUser
