"""API views for the booking domain."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.users.access import Principal
from apps.users.permissions import IsFrontDesk, IsOwner

from . import selectors, services
from .filters import BookingFilterSet
from .serializers import (
    BookingApprovalSerializer,
    BookingCancelSerializer,
    BookingCheckInSerializer,
    BookingCreateSerializer,
    BookingSerializer,
    FrontDeskBookingSerializer,
)


class BookingViewSet(viewsets.GenericViewSet):
    """Booking requests, the owner approval workflow and front-desk check-in/out."""

    serializer_class = BookingSerializer
    permission_classes = [IsOwner]
    filter_backends = [DjangoFilterBackend]
    filterset_class = BookingFilterSet
    lookup_value_regex = r"\d+"

    def get_queryset(self):  # type: ignore
        principal = Principal.from_request(self.request)
        if self.action == "frontdesk":
            return selectors.bookings_for_front_desk(principal.user_id)
        if self.action == "pending":
            return selectors.pending_bookings_for_owner(principal.user_id)
        return selectors.bookings_for_owner(principal.user_id)

    @extend_schema(request=BookingCreateSerializer)
    @action(
        detail=False,
        methods=["post"],
        url_path="create",
        url_name="create",
        permission_classes=[permissions.AllowAny],
    )
    def create_booking(self, request):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        guest_user = request.user if request.user.is_authenticated else None
        booking = services.create_booking(guest_user=guest_user, **serializer.validated_data)
        return Response(
            {
                "message": "Booking request created successfully. Awaiting owner approval.",
                "bookingId": booking.pk,
            },
            status=status.HTTP_200_OK,
        )

    @action(detail=False, methods=["get"], url_path="pending", url_name="pending")
    def pending(self, request):  # type: ignore
        return Response(BookingSerializer(self.get_queryset(), many=True).data)

    @action(detail=False, methods=["get"], url_path="owner", url_name="owner")
    def owner(self, request):  # type: ignore
        bookings = self.filter_queryset(self.get_queryset())
        return Response(BookingSerializer(bookings, many=True).data)

    @extend_schema(responses=FrontDeskBookingSerializer(many=True))
    @action(detail=False, methods=["get"], url_path="frontdesk", url_name="frontdesk", permission_classes=[IsFrontDesk])
    def frontdesk(self, request):  # type: ignore
        return Response(FrontDeskBookingSerializer(self.get_queryset(), many=True).data)

    @extend_schema(request=BookingApprovalSerializer)
    @action(detail=True, methods=["post"], url_path="approve", url_name="approve")
    def approve(self, request, pk=None):  # type: ignore
        serializer = BookingApprovalSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        is_approved = serializer.validated_data["isApproved"]
        booking = services.approve_booking(
            int(pk),
            Principal.from_request(request),
            is_approved=is_approved,
            rejection_reason=serializer.validated_data.get("rejectionReason") or "",
        )
        return Response(
            {
                "message": "Booking approved successfully." if is_approved else "Booking rejected.",
                "status": booking.status,
                "qrCodeData": booking.qr_code_data,
            }
        )

    @extend_schema(request=BookingCheckInSerializer)
    @action(detail=True, methods=["post"], url_path="checkin", url_name="checkin", permission_classes=[IsFrontDesk])
    def checkin(self, request, pk=None):  # type: ignore
        serializer = BookingCheckInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = services.check_in(
            int(pk),
            Principal.from_request(request),
            serializer.validated_data["qrCodeData"],
        )
        return Response(
            {
                "message": "Guest checked in successfully.",
                "status": booking.status,
                "checkedInAt": booking.checked_in_at,
            }
        )

    @action(detail=True, methods=["post"], url_path="checkout", url_name="checkout", permission_classes=[IsFrontDesk])
    def checkout(self, request, pk=None):  # type: ignore
        booking = services.check_out(int(pk), Principal.from_request(request))
        return Response(
            {
                "message": "Guest checked out successfully.",
                "status": booking.status,
                "checkedOutAt": booking.checked_out_at,
            }
        )

    @extend_schema(request=BookingCancelSerializer)
    @action(detail=True, methods=["post"], url_path="cancel", url_name="cancel")
    def cancel(self, request, pk=None):  # type: ignore
        serializer = BookingCancelSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = services.cancel_booking(
            int(pk),
            Principal.from_request(request),
            reason=serializer.validated_data.get("reason") or "",
        )
        return Response({"message": "Booking cancelled.", "status": booking.status})
