"""
Unit of Work Pattern

Wraps a database transaction and defers domain events until the
transaction has committed, so notification work never observes (or
blocks) uncommitted state.
"""

from typing import List
import logging

from django.db import transaction

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class DjangoUnitOfWork:
    """
    Django implementation of Unit of Work

    Usage:
        with DjangoUnitOfWork() as uow:
            booking = Booking.objects.select_for_update().get(pk=booking_id)
            booking.transition_to(Booking.Status.APPROVED)
            booking.save()
            uow.record(BookingApproved(booking_id=booking.pk, ...))
        # Events are published after commit
    """

    def __init__(self):
        self._events: List[DomainEvent] = []
        self._transaction = None

    def __enter__(self):
        """Start database transaction"""
        self._transaction = transaction.atomic()
        self._transaction.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Complete or rollback transaction"""
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._transaction.__exit__(exc_type, exc_val, exc_tb)

    def record(self, event: DomainEvent):
        """Queue an event for publication after commit."""
        self._events.append(event)

    def commit(self):
        """
        Schedule event publishing with transaction.on_commit() so events are
        only sent after the database commit succeeds.
        """
        events = self._events.copy()
        self._events.clear()
        logger.debug(f"Committing unit of work with {len(events)} events")
        if events:
            transaction.on_commit(lambda: self._publish_events(events))

    def rollback(self):
        """Discard events recorded in a failed unit of work"""
        if self._events:
            logger.warning(f"Rolling back transaction, discarding {len(self._events)} events")
        self._events.clear()

    @staticmethod
    def _publish_events(events: List[DomainEvent]):
        from shared.application.message_bus import message_bus

        logger.info(f"Publishing {len(events)} domain events after commit")
        try:
            message_bus.publish_events(events)
        except Exception as e:
            # The state change is committed; delivery problems stay out of the request.
            logger.error(f"Error publishing events: {e}", exc_info=True)
