"""Response shapes for dashboard endpoints."""

from __future__ import annotations

from rest_framework import ISO_8601, serializers  # type: ignore

from apps.bookings.models import Booking
from apps.bookings.serializers import UTCDateTimeField
from apps.condos.models import Condo


class DashboardCondoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Condo
        fields = ["id", "name", "location", "status", "max_guests", "price_per_night", "image_url", "created_at"]
        read_only_fields = fields


class DashboardBookingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Booking
        fields = ["id", "status", "start_datetime", "end_datetime", "guest_count", "full_name"]
        read_only_fields = fields


class ConflictingBookingSerializer(serializers.ModelSerializer):
    class Meta:
        model = Booking
        fields = ["start_datetime", "end_datetime", "status"]
        read_only_fields = fields


class OwnerDashboardSerializer(serializers.Serializer):
    condo = DashboardCondoSerializer()
    bookings = DashboardBookingSerializer(many=True)
    total_bookings = serializers.IntegerField()
    pending_bookings = serializers.IntegerField()
    active_bookings = serializers.IntegerField()
    revenue = serializers.DecimalField(max_digits=14, decimal_places=2)


class FrontDeskDashboardSerializer(serializers.Serializer):
    condo = DashboardCondoSerializer()
    today_bookings = serializers.IntegerField()
    pending_check_ins = serializers.IntegerField()
    active_guests = serializers.IntegerField()
    recent_bookings = DashboardBookingSerializer(many=True)


class AvailabilitySerializer(serializers.Serializer):
    condo_id = serializers.IntegerField()
    condo_name = serializers.CharField()
    is_available = serializers.BooleanField()
    available_dates = serializers.ListField(child=serializers.DateField())
    conflicting_bookings = ConflictingBookingSerializer(many=True)
    max_guests = serializers.IntegerField()
    price_per_night = serializers.DecimalField(max_digits=10, decimal_places=2)


class AvailabilityQuerySerializer(serializers.Serializer):
    """``startDate``/``endDate`` as ISO instants or plain dates (midnight UTC)."""

    startDate = UTCDateTimeField(input_formats=[ISO_8601, "%Y-%m-%d"])
    endDate = UTCDateTimeField(input_formats=[ISO_8601, "%Y-%m-%d"])

    def validate(self, attrs):  # type: ignore
        if attrs["endDate"] <= attrs["startDate"]:
            raise serializers.ValidationError({"endDate": "End date must be after start date."})
        return attrs


class StatusCountSerializer(serializers.Serializer):
    status = serializers.CharField()
    count = serializers.IntegerField()


class OwnerStatsSerializer(serializers.Serializer):
    total_condos = serializers.IntegerField()
    total_bookings = serializers.IntegerField()
    monthly_revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    status_breakdown = StatusCountSerializer(many=True)
    occupancy_rate = serializers.FloatField()
