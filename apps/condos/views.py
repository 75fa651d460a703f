"""API views for the condo lifecycle."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.access import Principal
from apps.users.permissions import IsFrontDesk, IsOwner

from . import selectors, services
from .serializers import (
    CondoCreateSerializer,
    CondoPublicSerializer,
    CondoSerializer,
    CondoStatusSerializer,
    CondoUpdateSerializer,
    FrontDeskCondoSerializer,
    OwnerCondoSerializer,
)


def public_base_url(request) -> str:
    """Where guests reach the booking page: configured origin, else the request's own."""
    return settings.PUBLIC_BOOKING_BASE_URL or request.build_absolute_uri("/")


class CondoViewSet(viewsets.GenericViewSet):
    """Owner-managed condos plus the front-desk and public read views."""

    permission_classes = [IsOwner]
    serializer_class = CondoSerializer
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        return selectors.owner_condos(Principal.from_request(self.request).user_id)

    @extend_schema(request=CondoCreateSerializer, responses=CondoSerializer)
    @action(detail=False, methods=["post"], url_path="create", url_name="create")
    def create_condo(self, request):  # type: ignore
        serializer = CondoCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        condo = services.create_condo(
            request.user,
            serializer.validated_data,
            base_url=public_base_url(request),
        )
        return Response(
            {"message": "Condo and Front Desk created successfully", "condo": CondoSerializer(condo).data},
            status=status.HTTP_200_OK,
        )

    @extend_schema(responses=OwnerCondoSerializer(many=True))
    @action(detail=False, methods=["get"], url_path="owner", url_name="owner")
    def owner(self, request):  # type: ignore
        condos = self.get_queryset()
        return Response(OwnerCondoSerializer(condos, many=True).data)

    @extend_schema(responses=FrontDeskCondoSerializer)
    @action(detail=False, methods=["get"], url_path="frontdesk", url_name="frontdesk", permission_classes=[IsFrontDesk])
    def frontdesk(self, request):  # type: ignore
        condo = selectors.front_desk_condo(Principal.from_request(request).user_id)
        return Response(FrontDeskCondoSerializer(condo).data)

    @extend_schema(responses=CondoPublicSerializer)
    @action(
        detail=False,
        methods=["get"],
        url_path=r"public/(?P<condo_id>\d+)",
        url_name="public",
        permission_classes=[permissions.AllowAny],
        authentication_classes=[],
    )
    def public(self, request, condo_id=None):  # type: ignore
        condo = selectors.public_condo(int(condo_id))
        return Response(CondoPublicSerializer(condo).data)

    @extend_schema(request=CondoUpdateSerializer, responses=CondoSerializer)
    def update(self, request, pk=None):  # type: ignore
        serializer = CondoUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        condo = services.update_condo(
            int(pk),
            Principal.from_request(request),
            serializer.validated_data,
            base_url=public_base_url(request),
        )
        return Response({"message": "Condo updated successfully", "condo": CondoSerializer(condo).data})

    @extend_schema(request=CondoStatusSerializer)
    @action(detail=True, methods=["patch"], url_path="status", url_name="status")
    def change_status(self, request, pk=None):  # type: ignore
        serializer = CondoStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        condo = services.update_condo_status(
            int(pk),
            Principal.from_request(request),
            serializer.validated_data["status"],
        )
        return Response({"message": "Condo status updated successfully", "status": condo.status})

    def destroy(self, request, pk=None):  # type: ignore
        services.delete_condo(int(pk), Principal.from_request(request))
        return Response({"message": "Condo deleted successfully"}, status=status.HTTP_200_OK)
