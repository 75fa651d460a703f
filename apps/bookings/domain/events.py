"""
Booking Domain Events

Events that represent things that have happened in the booking domain.
These are published after successful transaction commits.
"""

from dataclasses import dataclass

from shared.domain.base import DomainEvent


@dataclass(frozen=True, kw_only=True)
class BookingApproved(DomainEvent):
    """
    Event: Owner approved a booking (PendingApproval -> Approved)

    Triggers:
    - Approval email to the guest with the QR check-in code
    """
    booking_id: int
    condo_id: int

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(booking_id=self.booking_id, condo_id=self.condo_id)
        return data


@dataclass(frozen=True, kw_only=True)
class BookingRejected(DomainEvent):
    """
    Event: Owner rejected a booking (PendingApproval -> Rejected)

    Triggers:
    - Rejection email to the guest
    """
    booking_id: int
    condo_id: int
    reason: str = ""

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(booking_id=self.booking_id, condo_id=self.condo_id, reason=self.reason)
        return data


@dataclass(frozen=True, kw_only=True)
class BookingCancelled(DomainEvent):
    """
    Event: Owner cancelled a pending or approved booking

    Triggers:
    - Cancellation email to the guest
    """
    booking_id: int
    condo_id: int
    reason: str = ""

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(booking_id=self.booking_id, condo_id=self.condo_id, reason=self.reason)
        return data
