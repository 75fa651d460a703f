"""Views for authentication flows (owner/guest registration, login, token refresh)."""

from __future__ import annotations

import logging

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from .auth_serializers import LoginSerializer, RegisterSerializer
from .models import CustomUser
from .serializers import UserSerializer
from .tokens import tokens_for_user

logger = logging.getLogger(__name__)


class _RegisterView(APIView):
    permission_classes = [AllowAny]
    role: str = CustomUser.Role.GUEST

    def post(self, request):  # type: ignore
        serializer = RegisterSerializer(data=request.data, role=self.role)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Registered {user.role} account {user.username} (id={user.pk})")
        data = {
            "message": "Registration successful.",
            "user": UserSerializer(user).data,
            "tokens": tokens_for_user(user),
        }
        return Response(data, status=status.HTTP_201_CREATED)


class RegisterOwnerView(_RegisterView):
    role = CustomUser.Role.OWNER


class RegisterGuestView(_RegisterView):
    role = CustomUser.Role.GUEST


class LoginView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):  # type: ignore
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        tokens = tokens_for_user(user)
        data = {
            "token": tokens["access"],
            "refresh": tokens["refresh"],
            "user": UserSerializer(user).data,
        }
        return Response(data, status=status.HTTP_200_OK)
