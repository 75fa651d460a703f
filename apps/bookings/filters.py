"""FilterSet definitions for booking listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """Narrows an owner's bookings by status, condo and stay window."""

    status = django_filters.ChoiceFilter(field_name="status", choices=Booking.Status.choices)
    condo = django_filters.NumberFilter(field_name="condo_id", lookup_expr="exact")
    starts_after = django_filters.IsoDateTimeFilter(field_name="start_datetime", lookup_expr="gte")
    ends_before = django_filters.IsoDateTimeFilter(field_name="end_datetime", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = ["status", "condo"]
