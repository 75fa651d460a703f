"""Access-scoped read queries over bookings."""

from __future__ import annotations

from .models import Booking


def _with_condo():
    return Booking.objects.select_related("condo")


def bookings_for_owner(owner_id: int):
    return _with_condo().owned_by(owner_id).order_by("-created_at", "-pk")


def pending_bookings_for_owner(owner_id: int):
    return bookings_for_owner(owner_id).filter(status=Booking.Status.PENDING_APPROVAL)


def bookings_for_front_desk(front_desk_id: int):
    return _with_condo().at_front_desk(front_desk_id).order_by("-created_at", "-pk")
