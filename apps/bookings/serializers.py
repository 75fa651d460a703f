"""Serializers for the booking domain."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.condos.serializers import CondoSummarySerializer
from shared.domain.value_objects import to_utc

from .models import Booking


class UTCDateTimeField(serializers.DateTimeField):
    """Accepts any ISO instant; naive values are read as UTC, others converted."""

    def enforce_timezone(self, value):  # type: ignore
        return to_utc(value)


class BookingCreateSerializer(serializers.Serializer):
    """Public booking request."""

    condo_id = serializers.IntegerField(min_value=1)
    full_name = serializers.CharField(max_length=255)
    email = serializers.EmailField()
    contact = serializers.CharField(max_length=50)
    guest_count = serializers.IntegerField(min_value=1, max_value=10)
    start_datetime = UTCDateTimeField()
    end_datetime = UTCDateTimeField()
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")
    payment_image_url = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        default="",
        trim_whitespace=False,
    )

    def validate_payment_image_url(self, value):  # type: ignore
        if value and len(value.encode("utf-8")) > settings.BOOKING_PAYMENT_IMAGE_MAX_BYTES:
            raise serializers.ValidationError(
                f"Payment image must not exceed {settings.BOOKING_PAYMENT_IMAGE_MAX_BYTES} bytes."
            )
        return value or ""

    def validate(self, attrs):  # type: ignore
        if attrs["end_datetime"] <= attrs["start_datetime"]:
            raise serializers.ValidationError({"end_datetime": "End date must be after start date."})
        attrs["notes"] = attrs.get("notes") or ""
        return attrs


class BookingApprovalSerializer(serializers.Serializer):
    isApproved = serializers.BooleanField()
    rejectionReason = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)


class BookingCheckInSerializer(serializers.Serializer):
    qrCodeData = serializers.CharField(allow_blank=True, trim_whitespace=False)


class BookingCancelSerializer(serializers.Serializer):
    reason = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=500)


class BookingSerializer(serializers.ModelSerializer):
    """Owner-facing booking with its condo summary."""

    condo = CondoSummarySerializer(read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "full_name",
            "email",
            "contact",
            "guest_count",
            "start_datetime",
            "end_datetime",
            "status",
            "created_at",
            "approved_at",
            "notes",
            "rejection_reason",
            "payment_image_url",
            "condo",
        ]
        read_only_fields = fields


class FrontDeskBookingSerializer(BookingSerializer):
    """Adds the QR token and the lifecycle stamps the desk works from."""

    class Meta(BookingSerializer.Meta):
        fields = BookingSerializer.Meta.fields + [
            "qr_code_data",
            "checked_in_at",
            "checked_out_at",
        ]
        read_only_fields = fields
