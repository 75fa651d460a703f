"""Condo domain models for CondoSystem.

Every condo has exactly one owner and exactly one front-desk account.
The owner edge is PROTECT so removing a condo can never reach the owner's
account; the front-desk edge is a one-to-one CASCADE so the account and
the condo live and die together.
"""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Condo(models.Model):
    """A bookable condo unit."""

    class Status(models.TextChoices):
        AVAILABLE = "Available", _("Available")
        OCCUPIED = "Occupied", _("Occupied")
        MAINTENANCE = "Maintenance", _("Maintenance")
        UNAVAILABLE = "Unavailable", _("Unavailable")

    # Occupied is derived from bookings and never set by the owner directly.
    OWNER_SETTABLE_STATUSES = (Status.AVAILABLE, Status.MAINTENANCE, Status.UNAVAILABLE)

    name = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    amenities = models.TextField(blank=True, help_text=_("Free text or comma-separated list."))
    max_guests = models.PositiveSmallIntegerField(
        default=4,
        validators=[MinValueValidator(1), MaxValueValidator(20)],
    )
    price_per_night = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    image_url = models.TextField(blank=True)
    unique_code = models.UUIDField(default=uuid.uuid4, unique=True, editable=False)
    booking_link = models.URLField(max_length=500, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.AVAILABLE)
    created_at = models.DateTimeField(auto_now_add=True)
    last_updated = models.DateTimeField(null=True, blank=True)

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="owned_condos",
    )
    front_desk = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="front_desk_condo",
    )

    class Meta:
        verbose_name = _("Condo")
        verbose_name_plural = _("Condos")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["name", "location"], name="condo_unique_name_location"),
            models.CheckConstraint(
                condition=models.Q(max_guests__gte=1) & models.Q(max_guests__lte=20),
                name="condo_max_guests_range",
            ),
            models.CheckConstraint(
                condition=models.Q(price_per_night__gte=0),
                name="condo_price_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["owner", "status"], name="condo_owner_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.location})"

    def set_status(self, status: str) -> None:
        self.status = status
        self.touch()

    def touch(self) -> None:
        self.last_updated = timezone.now()

    def build_booking_link(self, base_url: str) -> str:
        return f"{base_url.rstrip('/')}{settings.BOOKING_PAGE_PATH}?condoId={self.pk}"
