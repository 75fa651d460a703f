"""Serializers for the condo lifecycle API."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserContactSerializer

from .models import Condo


class CondoCreateSerializer(serializers.Serializer):
    """Payload for provisioning a condo and its front-desk account."""

    name = serializers.CharField(max_length=255)
    location = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    amenities = serializers.CharField(required=False, allow_blank=True, default="")
    max_guests = serializers.IntegerField(min_value=1, max_value=20, default=4)
    price_per_night = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.00"),
        default=Decimal("0.00"),
    )
    image_url = serializers.CharField(required=False, allow_blank=True, default="")
    front_desk_username = serializers.CharField(max_length=150)
    front_desk_password = serializers.CharField(min_length=6, write_only=True, trim_whitespace=False)


class CondoUpdateSerializer(serializers.Serializer):
    """
    Partial update payload. Every field is optional and values that fail
    their check are ignored by the service instead of rejected here.
    """

    name = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    location = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    amenities = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image_url = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    max_guests = serializers.JSONField(required=False, allow_null=True)
    price_per_night = serializers.JSONField(required=False, allow_null=True)


class CondoStatusSerializer(serializers.Serializer):
    status = serializers.CharField()


class CondoSerializer(serializers.ModelSerializer):
    class Meta:
        model = Condo
        fields = [
            "id",
            "name",
            "location",
            "description",
            "amenities",
            "max_guests",
            "price_per_night",
            "status",
            "image_url",
            "unique_code",
            "booking_link",
            "created_at",
            "last_updated",
        ]
        read_only_fields = fields


class OwnerCondoSerializer(CondoSerializer):
    """An owner's condo with its front-desk contact and booking counters."""

    front_desk = UserContactSerializer(read_only=True)
    total_bookings = serializers.IntegerField(read_only=True)
    pending_bookings = serializers.IntegerField(read_only=True)
    active_bookings = serializers.IntegerField(read_only=True)

    class Meta(CondoSerializer.Meta):
        fields = CondoSerializer.Meta.fields + [
            "front_desk",
            "total_bookings",
            "pending_bookings",
            "active_bookings",
        ]
        read_only_fields = fields


class FrontDeskCondoSerializer(serializers.ModelSerializer):
    owner = UserContactSerializer(read_only=True)
    today_bookings = serializers.IntegerField(read_only=True)
    pending_check_ins = serializers.IntegerField(read_only=True)
    active_guests = serializers.IntegerField(read_only=True)

    class Meta:
        model = Condo
        fields = [
            "id",
            "name",
            "location",
            "description",
            "amenities",
            "max_guests",
            "price_per_night",
            "status",
            "image_url",
            "created_at",
            "owner",
            "today_bookings",
            "pending_check_ins",
            "active_guests",
        ]
        read_only_fields = fields


class CondoPublicSerializer(serializers.ModelSerializer):
    """What an anonymous visitor sees before booking."""

    class Meta:
        model = Condo
        fields = [
            "id",
            "name",
            "location",
            "description",
            "amenities",
            "max_guests",
            "price_per_night",
            "status",
            "image_url",
            "created_at",
        ]
        read_only_fields = fields


class CondoSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Condo
        fields = ["id", "name", "location", "image_url"]
        read_only_fields = fields
