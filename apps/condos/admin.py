"""Admin registration for condos."""

from __future__ import annotations

from django.contrib import admin

from .models import Condo


@admin.register(Condo)
class CondoAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "location",
        "owner",
        "front_desk",
        "status",
        "max_guests",
        "price_per_night",
        "created_at",
    )
    list_filter = ("status", "created_at")
    search_fields = ("name", "location", "owner__email", "front_desk__username")
    readonly_fields = ("unique_code", "booking_link", "created_at", "last_updated")
