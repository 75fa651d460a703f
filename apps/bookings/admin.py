"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "condo",
        "full_name",
        "email",
        "status",
        "guest_count",
        "start_datetime",
        "end_datetime",
        "created_at",
    )
    list_filter = ("status", "start_datetime", "end_datetime")
    search_fields = ("full_name", "email", "contact", "condo__name", "qr_code_data")
    readonly_fields = (
        "qr_code_data",
        "created_at",
        "approved_at",
        "approved_by",
        "checked_in_at",
        "checked_out_at",
    )
