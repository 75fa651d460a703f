"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.contrib.auth.password_validation import validate_password  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import exceptions, serializers  # type: ignore


User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    """Creates an account with the role chosen by the view."""

    username = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(min_length=6, write_only=True)
    full_name = serializers.CharField(required=False, allow_blank=True, max_length=255)

    def __init__(self, *args: Any, role: str = User.Role.GUEST, **kwargs: Any):
        self.role = role
        super().__init__(*args, **kwargs)

    def validate_password(self, value: str) -> str:
        validate_password(value)
        return value

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if User.objects.filter(email__iexact=attrs["email"]).exists():
            raise serializers.ValidationError({"email": "Email is already in use."})
        if User.objects.filter(username=attrs["username"]).exists():
            raise serializers.ValidationError({"username": "Username is already in use."})
        return attrs

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        return User.objects.create_user(password=password, role=self.role, **validated_data)


class LoginSerializer(serializers.Serializer):
    login = serializers.CharField(help_text="Email or username")
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        user = User.objects.find_by_login(attrs.get("login", ""))
        if user is None or not user.is_active or not user.check_password(attrs.get("password", "")):
            raise exceptions.AuthenticationFailed("Invalid login attempt.")
        attrs["user"] = user
        return attrs
