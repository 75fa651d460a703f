"""
Booking State Machine

The closed transition table for Booking.status. Every status change in
the booking domain goes through ``ensure_transition`` so illegal moves
are rejected in one place.

    PendingApproval -> Approved | Rejected | Cancelled
    Approved        -> CheckedIn | Cancelled
    CheckedIn       -> CheckedOut

Rejected, Cancelled and CheckedOut are terminal.
"""

from enum import Enum

from shared.domain.exceptions import InvalidStateError


class BookingStatus(str, Enum):
    PENDING_APPROVAL = "PendingApproval"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"
    CHECKED_IN = "CheckedIn"
    CHECKED_OUT = "CheckedOut"

    @classmethod
    def parse(cls, value) -> "BookingStatus":
        if isinstance(value, cls):
            return value
        return cls(str(value))


TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.PENDING_APPROVAL: frozenset(
        {BookingStatus.APPROVED, BookingStatus.REJECTED, BookingStatus.CANCELLED}
    ),
    BookingStatus.APPROVED: frozenset({BookingStatus.CHECKED_IN, BookingStatus.CANCELLED}),
    BookingStatus.CHECKED_IN: frozenset({BookingStatus.CHECKED_OUT}),
    BookingStatus.REJECTED: frozenset(),
    BookingStatus.CANCELLED: frozenset(),
    BookingStatus.CHECKED_OUT: frozenset(),
}

TERMINAL_STATUSES = frozenset(status for status, targets in TRANSITIONS.items() if not targets)

# Bookings in these statuses hold their dates on the condo.
BLOCKING_STATUSES = frozenset(set(BookingStatus) - {BookingStatus.REJECTED, BookingStatus.CANCELLED})


def can_transition(current, target) -> bool:
    return BookingStatus.parse(target) in TRANSITIONS[BookingStatus.parse(current)]


def is_terminal(status) -> bool:
    return BookingStatus.parse(status) in TERMINAL_STATUSES


def ensure_transition(current, target) -> None:
    """Raise InvalidStateError unless ``current -> target`` is in the table."""
    if not can_transition(current, target):
        current_value = BookingStatus.parse(current).value
        raise InvalidStateError(
            f"Booking cannot move from {current_value} to {BookingStatus.parse(target).value}.",
        )
