"""Booking workflow errors."""

from __future__ import annotations

from shared.domain.exceptions import (
    ConflictError,
    InvalidInputError,
    InvalidStateError,
    NotFoundError,
)


class BookingNotFoundError(NotFoundError):
    code = "BookingNotFound"
    default_message = "Booking not found or you don't have permission to access it."


class BookingConflictError(ConflictError):
    """Raised when a condo is busy for the requested dates."""

    code = "BookingConflict"
    default_message = "Condo is not available for the selected dates."


class GuestLimitExceededError(InvalidInputError):
    code = "GuestLimitExceeded"

    def __init__(self, max_guests: int):
        super().__init__(f"Maximum {max_guests} guests allowed for this condo.")
        self.max_guests = max_guests


class InvalidQrCodeError(InvalidInputError):
    code = "InvalidQrCode"
    default_message = "Invalid QR code."


class CheckInTooEarlyError(InvalidStateError):
    code = "CheckInTooEarly"
    default_message = "Check-in is not yet allowed. Please wait until the booking start time."
