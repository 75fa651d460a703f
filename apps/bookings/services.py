"""Domain services for booking workflows."""

from __future__ import annotations

import logging
from datetime import datetime

from django.db import IntegrityError, transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore
from django.utils import timezone  # type: ignore

from apps.condos.models import Condo
from apps.users.access import Principal
from shared.application.uow import DjangoUnitOfWork
from shared.domain.exceptions import InvalidInputError, NotFoundError
from shared.domain.value_objects import TimeRange

from .domain.events import BookingApproved, BookingCancelled, BookingRejected
from .domain.state_machine import ensure_transition
from .exceptions import (
    BookingConflictError,
    BookingNotFoundError,
    CheckInTooEarlyError,
    GuestLimitExceededError,
    InvalidQrCodeError,
)
from .models import Booking

logger = logging.getLogger(__name__)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def find_conflicting_bookings(condo_id: int, period: TimeRange):
    """Active bookings on the condo whose [start, end) overlaps ``period``."""

    return Booking.objects.filter(condo_id=condo_id).blocking().overlapping(period.start, period.end)


def ensure_condo_is_available(condo_id: int, period: TimeRange) -> None:
    """Ensure the condo is free for the given period."""

    if find_conflicting_bookings(condo_id, period).exists():
        raise BookingConflictError()


def _get_booking_for_owner(booking_id: int, principal: Principal) -> Booking:
    # Bookings on someone else's condo read as missing.
    queryset = Booking.objects.select_related("condo").filter(pk=booking_id)
    booking = _lock_queryset_if_possible(queryset).first()
    if booking is None or not principal.is_owner_of(booking.condo):
        raise BookingNotFoundError()
    return booking


def _get_booking_for_front_desk(booking_id: int, principal: Principal) -> Booking:
    queryset = Booking.objects.select_related("condo").filter(pk=booking_id)
    booking = _lock_queryset_if_possible(queryset).first()
    if booking is None or not principal.is_front_desk_of(booking.condo):
        raise BookingNotFoundError()
    return booking


def create_booking(
    *,
    condo_id: int,
    full_name: str,
    email: str,
    contact: str,
    guest_count: int,
    start_datetime: datetime,
    end_datetime: datetime,
    notes: str = "",
    payment_image_url: str = "",
    guest_user=None,
) -> Booking:
    """
    Record a booking request in PendingApproval.

    The condo row is locked for the duration of the check-then-insert so
    concurrent requests for the same condo are serialised; on PostgreSQL
    the exclusion constraint is the final guard.
    """
    try:
        period = TimeRange(start_datetime, end_datetime)
    except ValueError as exc:
        raise InvalidInputError("End date must be after start date.") from exc

    with transaction.atomic():
        condo = _lock_queryset_if_possible(Condo.objects.filter(pk=condo_id)).first()
        if condo is None:
            raise NotFoundError("Condo not found.", code="CondoNotFound")

        ensure_condo_is_available(condo.pk, period)

        if guest_count > condo.max_guests:
            raise GuestLimitExceededError(condo.max_guests)

        try:
            with transaction.atomic():
                booking = Booking.objects.create(
                    condo=condo,
                    guest_user=guest_user,
                    full_name=full_name,
                    email=email,
                    contact=contact,
                    guest_count=guest_count,
                    start_datetime=period.start,
                    end_datetime=period.end,
                    notes=notes or "",
                    payment_image_url=payment_image_url or "",
                )
        except IntegrityError as exc:
            logger.warning(f"Overlap rejected by database for condo {condo.pk} ({period})")
            raise BookingConflictError() from exc

    logger.info(f"Booking {booking.pk} requested for condo {condo.pk} ({period}, {guest_count} guests)")
    return booking


def approve_booking(booking_id: int, principal: Principal, *, is_approved: bool, rejection_reason: str = "") -> Booking:
    """Approve (issuing a QR token and occupying the condo) or reject a pending booking."""

    with DjangoUnitOfWork() as uow:
        booking = _get_booking_for_owner(booking_id, principal)

        if is_approved:
            booking.transition_to(Booking.Status.APPROVED)
            booking.approved_by_id = principal.user_id
            booking.issue_qr_code()
            booking.save(update_fields=["status", "approved_at", "approved_by", "qr_code_data"])

            condo = booking.condo
            condo.set_status(Condo.Status.OCCUPIED)
            condo.save(update_fields=["status", "last_updated"])

            uow.record(BookingApproved(booking_id=booking.pk, condo_id=booking.condo_id))
            logger.info(f"Booking {booking.pk} approved by owner {principal.user_id}")
        else:
            booking.transition_to(Booking.Status.REJECTED)
            booking.rejection_reason = rejection_reason or ""
            booking.save(update_fields=["status", "rejection_reason"])

            uow.record(
                BookingRejected(
                    booking_id=booking.pk,
                    condo_id=booking.condo_id,
                    reason=booking.rejection_reason,
                )
            )
            logger.info(f"Booking {booking.pk} rejected by owner {principal.user_id}")

    return booking


@transaction.atomic
def check_in(booking_id: int, principal: Principal, qr_code_data: str, *, now: datetime | None = None) -> Booking:
    """Admit the guest: status first, then the token, then the clock."""

    booking = _get_booking_for_front_desk(booking_id, principal)
    ensure_transition(booking.status, Booking.Status.CHECKED_IN)

    if not qr_code_data or qr_code_data != booking.qr_code_data:
        raise InvalidQrCodeError()

    now = now or timezone.now()
    if now < booking.start_datetime:
        raise CheckInTooEarlyError()

    booking.transition_to(Booking.Status.CHECKED_IN, at=now)
    booking.save(update_fields=["status", "checked_in_at"])

    condo = booking.condo
    condo.set_status(Condo.Status.OCCUPIED)
    condo.save(update_fields=["status", "last_updated"])

    logger.info(f"Booking {booking.pk} checked in at condo {condo.pk} by front desk {principal.user_id}")
    return booking


@transaction.atomic
def check_out(booking_id: int, principal: Principal) -> Booking:
    booking = _get_booking_for_front_desk(booking_id, principal)
    booking.transition_to(Booking.Status.CHECKED_OUT)
    booking.save(update_fields=["status", "checked_out_at"])

    condo = booking.condo
    condo.set_status(Condo.Status.AVAILABLE)
    condo.save(update_fields=["status", "last_updated"])

    logger.info(f"Booking {booking.pk} checked out of condo {condo.pk} by front desk {principal.user_id}")
    return booking


def cancel_booking(booking_id: int, principal: Principal, *, reason: str = "") -> Booking:
    """
    Cancel a pending or approved booking.

    The condo is released back to Available only when nothing else is
    holding it occupied.
    """
    with DjangoUnitOfWork() as uow:
        booking = _get_booking_for_owner(booking_id, principal)
        booking.transition_to(Booking.Status.CANCELLED)
        booking.rejection_reason = reason or ""
        booking.save(update_fields=["status", "rejection_reason"])

        condo = booking.condo
        still_occupied = (
            Booking.objects.filter(condo_id=condo.pk, status__in=Booking.ACTIVE_STAY_STATUSES)
            .exclude(pk=booking.pk)
            .exists()
        )
        if condo.status == Condo.Status.OCCUPIED and not still_occupied:
            condo.set_status(Condo.Status.AVAILABLE)
            condo.save(update_fields=["status", "last_updated"])

        uow.record(BookingCancelled(booking_id=booking.pk, condo_id=condo.pk, reason=booking.rejection_reason))
        logger.info(f"Booking {booking.pk} cancelled by owner {principal.user_id}")

    return booking
