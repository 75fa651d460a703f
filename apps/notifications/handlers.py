"""
Message-bus handlers for booking events.

Each handler records an outbox row and enqueues its delivery. They run
after the booking transaction has committed, so nothing here can undo
or fail a booking decision.
"""

from __future__ import annotations

import logging

from apps.bookings.domain.events import BookingApproved, BookingCancelled, BookingRejected
from apps.bookings.models import Booking
from shared.application.message_bus import MessageBus, message_bus
from shared.domain.base import DomainEvent

from .models import NotificationDelivery

logger = logging.getLogger(__name__)


def enqueue_delivery(kind: str, event: DomainEvent, booking_id: int) -> NotificationDelivery | None:
    booking = Booking.objects.filter(pk=booking_id).only("pk", "email").first()
    if booking is None:
        logger.warning(f"Booking {booking_id} vanished before {kind} notification was queued")
        return None

    delivery = NotificationDelivery.objects.create(
        kind=kind,
        booking=booking,
        recipient_email=booking.email,
        context=event.to_dict(),
    )

    from .tasks import deliver_notification

    try:
        deliver_notification.delay(delivery.pk)
    except Exception as e:
        # Broker trouble leaves the row pending for operators.
        logger.error(f"Failed to enqueue notification {delivery.pk}: {e}", exc_info=True)
    return delivery


def handle_booking_approved(event: BookingApproved) -> None:
    enqueue_delivery(NotificationDelivery.Kind.BOOKING_APPROVED, event, event.booking_id)


def handle_booking_rejected(event: BookingRejected) -> None:
    enqueue_delivery(NotificationDelivery.Kind.BOOKING_REJECTED, event, event.booking_id)


def handle_booking_cancelled(event: BookingCancelled) -> None:
    enqueue_delivery(NotificationDelivery.Kind.BOOKING_CANCELLED, event, event.booking_id)


def register_handlers(bus: MessageBus = message_bus) -> None:
    bus.register_event_handler(BookingApproved, handle_booking_approved)
    bus.register_event_handler(BookingRejected, handle_booking_rejected)
    bus.register_event_handler(BookingCancelled, handle_booking_cancelled)
