"""Serializers for user-related API responses."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Public representation of an account, including its role set."""

    roles = serializers.ListField(child=serializers.CharField(), read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "full_name",
            "roles",
            "created_at",
        ]
        read_only_fields = fields


class UserContactSerializer(serializers.ModelSerializer):
    """Email and name only, used inside condo listings."""

    class Meta:
        model = User
        fields = ["email", "full_name"]
        read_only_fields = fields
