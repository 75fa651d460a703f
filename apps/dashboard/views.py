"""API views for owner and front-desk dashboards."""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, extend_schema  # type: ignore
from rest_framework.permissions import AllowAny  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.users.access import Principal
from apps.users.permissions import IsFrontDesk, IsOwner
from shared.domain.value_objects import TimeRange

from . import selectors
from .serializers import (
    AvailabilityQuerySerializer,
    AvailabilitySerializer,
    FrontDeskDashboardSerializer,
    OwnerDashboardSerializer,
    OwnerStatsSerializer,
)


class OwnerDashboardView(APIView):
    """Per-condo bookings, counters and revenue for the signed-in owner."""

    permission_classes = [IsOwner]

    @extend_schema(responses=OwnerDashboardSerializer(many=True))
    def get(self, request, format=None):  # type: ignore
        rows = selectors.owner_dashboard(Principal.from_request(request).user_id)
        return Response(OwnerDashboardSerializer(rows, many=True).data)


class FrontDeskDashboardView(APIView):
    permission_classes = [IsFrontDesk]

    @extend_schema(responses=FrontDeskDashboardSerializer)
    def get(self, request, format=None):  # type: ignore
        data = selectors.front_desk_dashboard(Principal.from_request(request).user_id)
        return Response(FrontDeskDashboardSerializer(data).data)


class CondoAvailabilityView(APIView):
    """Anonymous availability lookup for the public booking page."""

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        parameters=[
            OpenApiParameter("startDate", str, required=True),
            OpenApiParameter("endDate", str, required=True),
        ],
        responses=AvailabilitySerializer,
    )
    def get(self, request, condo_id: int, format=None):  # type: ignore
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        period = TimeRange(query.validated_data["startDate"], query.validated_data["endDate"])
        data = selectors.condo_availability(condo_id, period)
        return Response(AvailabilitySerializer(data).data)


class OwnerStatsView(APIView):
    permission_classes = [IsOwner]

    @extend_schema(responses=OwnerStatsSerializer)
    def get(self, request, format=None):  # type: ignore
        data = selectors.owner_stats(Principal.from_request(request).user_id)
        return Response(OwnerStatsSerializer(data).data)
