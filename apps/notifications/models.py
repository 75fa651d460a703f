"""Notification outbox.

One row per outbound guest email. Rows are created when a booking
decision is committed and are updated by the Celery worker that
delivers them, so operators can see which emails went out and which
failed.
"""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class NotificationDelivery(models.Model):
    """A queued email about a booking decision."""

    class Kind(models.TextChoices):
        BOOKING_APPROVED = "booking_approved", _("Booking approved")
        BOOKING_REJECTED = "booking_rejected", _("Booking rejected")
        BOOKING_CANCELLED = "booking_cancelled", _("Booking cancelled")

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        SENT = "sent", _("Sent")
        FAILED = "failed", _("Failed")

    kind = models.CharField(max_length=32, choices=Kind.choices)
    booking = models.ForeignKey(
        "bookings.Booking",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notifications",
    )
    recipient_email = models.EmailField()
    context = models.JSONField(default=dict, blank=True)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING)
    attempts = models.PositiveSmallIntegerField(default=0)
    error_message = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    sent_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="notification_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.get_kind_display()} to {self.recipient_email} ({self.status})"

    def mark_sent(self) -> None:
        self.status = self.Status.SENT
        self.sent_at = timezone.now()
        self.error_message = ""
        self.save(update_fields=["status", "sent_at", "error_message", "attempts"])

    def mark_failed(self, error: str) -> None:
        self.status = self.Status.FAILED
        self.error_message = error[:2000]
        self.save(update_fields=["status", "error_message", "attempts"])
