"""Booking domain models for CondoSystem."""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from .domain.state_machine import BLOCKING_STATUSES, ensure_transition


class BookingQuerySet(models.QuerySet):
    def blocking(self):
        """Bookings that still hold their dates (not Rejected or Cancelled)."""
        return self.filter(status__in=[status.value for status in BLOCKING_STATUSES])

    def overlapping(self, start, end):
        return self.filter(start_datetime__lt=end, end_datetime__gt=start)

    def owned_by(self, owner_id: int):
        return self.filter(condo__owner_id=owner_id)

    def at_front_desk(self, front_desk_id: int):
        return self.filter(condo__front_desk_id=front_desk_id)


class Booking(models.Model):
    """A guest's request to stay at a condo over a UTC time range."""

    class Status(models.TextChoices):
        PENDING_APPROVAL = "PendingApproval", _("Pending approval")
        APPROVED = "Approved", _("Approved")
        REJECTED = "Rejected", _("Rejected")
        CANCELLED = "Cancelled", _("Cancelled")
        CHECKED_IN = "CheckedIn", _("Checked in")
        CHECKED_OUT = "CheckedOut", _("Checked out")

    ACTIVE_STAY_STATUSES = (Status.APPROVED, Status.CHECKED_IN)

    condo = models.ForeignKey(
        "condos.Condo",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    guest_user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    full_name = models.CharField(max_length=255)
    email = models.EmailField()
    contact = models.CharField(max_length=50)
    guest_count = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(10)],
    )
    start_datetime = models.DateTimeField()
    end_datetime = models.DateTimeField()
    payment_image_url = models.TextField(blank=True)
    notes = models.TextField(blank=True)
    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING_APPROVAL,
    )
    qr_code_data = models.CharField(max_length=255, unique=True, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    approved_at = models.DateTimeField(null=True, blank=True)
    approved_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="approved_bookings",
    )
    rejection_reason = models.CharField(max_length=500, blank=True)
    checked_in_at = models.DateTimeField(null=True, blank=True)
    checked_out_at = models.DateTimeField(null=True, blank=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_datetime__gt=models.F("start_datetime")),
                name="booking_valid_range",
            ),
            models.CheckConstraint(
                condition=models.Q(guest_count__gte=1) & models.Q(guest_count__lte=10),
                name="booking_guest_count_range",
            ),
        ]
        indexes = [
            models.Index(fields=["condo", "start_datetime", "end_datetime"], name="booking_condo_period_idx"),
            models.Index(fields=["status"], name="booking_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} for condo {self.condo_id} ({self.status})"

    def transition_to(self, target: str, *, at=None) -> None:
        """Move to ``target`` if the transition table allows it and stamp the matching timestamp."""
        ensure_transition(self.status, target)
        self.status = target
        now = at or timezone.now()
        if target == self.Status.APPROVED:
            self.approved_at = now
        elif target == self.Status.CHECKED_IN:
            self.checked_in_at = now
        elif target == self.Status.CHECKED_OUT:
            self.checked_out_at = now

    def issue_qr_code(self) -> str:
        self.qr_code_data = f"CONDO_{self.condo_id}_BOOKING_{self.pk}_{uuid.uuid4()}"
        return self.qr_code_data
