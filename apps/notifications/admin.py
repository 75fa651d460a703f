"""Admin registration for the notification outbox."""

from __future__ import annotations

from django.contrib import admin

from .models import NotificationDelivery


@admin.register(NotificationDelivery)
class NotificationDeliveryAdmin(admin.ModelAdmin):
    list_display = ("id", "kind", "recipient_email", "booking", "status", "attempts", "created_at", "sent_at")
    list_filter = ("kind", "status", "created_at")
    search_fields = ("recipient_email", "booking__id")
    readonly_fields = ("context", "attempts", "error_message", "created_at", "sent_at")
