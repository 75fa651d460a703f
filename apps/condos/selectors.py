"""Access-scoped read queries over condos."""

from __future__ import annotations

from django.db.models import Count, Q  # type: ignore
from django.utils import timezone  # type: ignore

from apps.bookings.models import Booking

from .exceptions import CondoNotFoundError
from .models import Condo


def owner_condos(owner_id: int):
    """The owner's condos with booking counters and the front-desk contact."""
    return (
        Condo.objects.filter(owner_id=owner_id)
        .select_related("front_desk")
        .annotate(
            total_bookings=Count("bookings"),
            pending_bookings=Count(
                "bookings",
                filter=Q(bookings__status=Booking.Status.PENDING_APPROVAL),
            ),
            active_bookings=Count(
                "bookings",
                filter=Q(bookings__status__in=Booking.ACTIVE_STAY_STATUSES),
            ),
        )
        .order_by("-created_at")
    )


def front_desk_condo(front_desk_id: int, *, today=None) -> Condo:
    """
    The single condo assigned to a front-desk account, annotated with the
    counters the desk works from today.
    """
    today = today or timezone.now().date()
    condo = (
        Condo.objects.filter(front_desk_id=front_desk_id)
        .select_related("owner")
        .annotate(
            today_bookings=Count(
                "bookings",
                filter=Q(
                    bookings__start_datetime__date__lte=today,
                    bookings__end_datetime__date__gte=today,
                ),
            ),
            pending_check_ins=Count(
                "bookings",
                filter=Q(
                    bookings__status=Booking.Status.APPROVED,
                    bookings__start_datetime__date__lte=today,
                ),
            ),
            active_guests=Count(
                "bookings",
                filter=Q(bookings__status=Booking.Status.CHECKED_IN),
            ),
        )
        .first()
    )
    if condo is None:
        raise CondoNotFoundError("No condo assigned to this front desk account.")
    return condo


def public_condo(condo_id: int) -> Condo:
    condo = Condo.objects.filter(pk=condo_id).first()
    if condo is None:
        raise CondoNotFoundError("Condo not found.")
    return condo
