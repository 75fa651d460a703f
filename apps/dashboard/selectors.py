"""
Dashboard aggregates.

Revenue is summed in Python because nights stayed is a whole-day
difference between two instants, which has no portable SQL form.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

from django.db.models import Count, Prefetch  # type: ignore
from django.utils import timezone  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.services import find_conflicting_bookings
from apps.condos.exceptions import CondoNotFoundError
from apps.condos.models import Condo
from apps.condos.selectors import front_desk_condo
from shared.domain.value_objects import TimeRange, whole_days

RECENT_BOOKINGS_WINDOW = timedelta(days=7)
RECENT_BOOKINGS_LIMIT = 5
MONTHLY_REVENUE_WINDOW = timedelta(days=30)


def booking_revenue(booking: Booking, price_per_night: Decimal) -> Decimal:
    return whole_days(booking.start_datetime, booking.end_datetime) * price_per_night


def condo_revenue(condo: Condo, bookings) -> Decimal:
    """Sum over checked-out bookings of nights stayed times the nightly rate."""
    total = Decimal("0.00")
    for booking in bookings:
        if booking.status == Booking.Status.CHECKED_OUT:
            total += booking_revenue(booking, condo.price_per_night)
    return total


def owner_dashboard(owner_id: int) -> list[dict]:
    condos = (
        Condo.objects.filter(owner_id=owner_id)
        .prefetch_related(Prefetch("bookings", queryset=Booking.objects.order_by("start_datetime")))
        .order_by("-created_at")
    )
    rows = []
    for condo in condos:
        bookings = list(condo.bookings.all())
        rows.append(
            {
                "condo": condo,
                "bookings": bookings,
                "total_bookings": len(bookings),
                "pending_bookings": sum(1 for b in bookings if b.status == Booking.Status.PENDING_APPROVAL),
                "active_bookings": sum(1 for b in bookings if b.status in Booking.ACTIVE_STAY_STATUSES),
                "revenue": condo_revenue(condo, bookings),
            }
        )
    return rows


def front_desk_dashboard(front_desk_id: int, *, now: datetime | None = None) -> dict:
    now = now or timezone.now()
    condo = front_desk_condo(front_desk_id, today=now.date())
    recent = list(
        condo.bookings.filter(created_at__gte=now - RECENT_BOOKINGS_WINDOW).order_by("-created_at")[
            :RECENT_BOOKINGS_LIMIT
        ]
    )
    return {
        "condo": condo,
        "today_bookings": condo.today_bookings,
        "pending_check_ins": condo.pending_check_ins,
        "active_guests": condo.active_guests,
        "recent_bookings": recent,
    }


def condo_availability(condo_id: int, period: TimeRange) -> dict:
    condo = Condo.objects.filter(pk=condo_id).first()
    if condo is None:
        raise CondoNotFoundError("Condo not found.")

    conflicts = list(find_conflicting_bookings(condo.pk, period).order_by("start_datetime"))
    is_available = not conflicts
    return {
        "condo_id": condo.pk,
        "condo_name": condo.name,
        "is_available": is_available,
        "available_dates": period.calendar_dates() if is_available else [],
        "conflicting_bookings": conflicts,
        "max_guests": condo.max_guests,
        "price_per_night": condo.price_per_night,
    }


def owner_stats(owner_id: int, *, now: datetime | None = None) -> dict:
    now = now or timezone.now()
    condos = Condo.objects.filter(owner_id=owner_id)
    bookings = Booking.objects.owned_by(owner_id)

    total_condos = condos.count()
    occupied = condos.filter(status=Condo.Status.OCCUPIED).count()

    monthly_revenue = Decimal("0.00")
    recent_checkouts = bookings.select_related("condo").filter(
        status=Booking.Status.CHECKED_OUT,
        checked_out_at__gte=now - MONTHLY_REVENUE_WINDOW,
    )
    for booking in recent_checkouts:
        monthly_revenue += booking_revenue(booking, booking.condo.price_per_night)

    status_breakdown = [
        {"status": row["status"], "count": row["count"]}
        for row in bookings.order_by().values("status").annotate(count=Count("id")).order_by("status")
    ]

    return {
        "total_condos": total_condos,
        "total_bookings": bookings.count(),
        "monthly_revenue": monthly_revenue,
        "status_breakdown": status_breakdown,
        "occupancy_rate": round(occupied / total_condos * 100, 2) if total_condos else 0,
    }
