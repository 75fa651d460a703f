"""Celery tasks for notification delivery."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .models import NotificationDelivery
from .services import (
    render_booking_approved_email,
    render_booking_cancelled_email,
    render_booking_rejected_email,
    send_email_notification,
)

logger = logging.getLogger(__name__)

RENDERERS = {
    NotificationDelivery.Kind.BOOKING_APPROVED: render_booking_approved_email,
    NotificationDelivery.Kind.BOOKING_REJECTED: render_booking_rejected_email,
    NotificationDelivery.Kind.BOOKING_CANCELLED: render_booking_cancelled_email,
}


@shared_task(name="notifications.deliver_notification", max_retries=0, ignore_result=True)
def deliver_notification(delivery_id: int) -> bool:
    """
    Render and send one outbox email.

    Failures are logged and recorded on the row; they are never raised,
    so a broken mail server cannot bounce back into the booking workflow.
    """
    delivery = (
        NotificationDelivery.objects.select_related("booking", "booking__condo")
        .filter(pk=delivery_id)
        .first()
    )
    if delivery is None:
        logger.warning(f"Notification {delivery_id} not found")
        return False
    if delivery.status == NotificationDelivery.Status.SENT:
        return True

    delivery.attempts += 1
    try:
        if delivery.booking is None:
            raise LookupError("Booking no longer exists.")
        subject, html_message = RENDERERS[delivery.kind](delivery.booking)
        send_email_notification(delivery.recipient_email, subject, html_message)
    except Exception as e:
        logger.error(
            f"Notification {delivery.pk} ({delivery.kind}) to {delivery.recipient_email} failed: {e}",
            exc_info=True,
        )
        delivery.mark_failed(str(e))
        return False

    delivery.mark_sent()
    return True
