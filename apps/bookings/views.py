"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.cohosts.authorization import Action
from apps.cohosts.permissions import ResolverPermission

from .models import Booking
from .serializers import BookingCreateSerializer, BookingSerializer, BookingStatusSerializer
from .services import (
    bookings_managed_by,
    bookings_of_guest,
    cancel_booking,
    change_booking_status,
    create_booking,
    find_listing_by_id,
)


class BookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Bookings for guests, hosts and co-hosts.

    - `GET /` bookings on listings the caller hosts or manages as co-host
    - `GET /my-bookings/` the caller's own stays
    - `POST /` request a stay, created as pending
    - `PATCH /{id}/status/` confirm or cancel
    - `DELETE /{id}/` cancel; repeating it is harmless
    """

    queryset = Booking.objects.select_related("listing", "listing__host", "guest")
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAuthenticated, ResolverPermission]
    authorization_actions = {"retrieve": Action.BOOKING_READ}

    def get_queryset(self):  # type: ignore
        if self.action == "list":
            return bookings_managed_by(self.request.user)
        if self.action == "my_bookings":
            return bookings_of_guest(self.request.user)
        return super().get_queryset()

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        if self.action == "update_status":
            return BookingStatusSerializer
        return BookingSerializer

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        listing = find_listing_by_id(data["listing_id"])
        booking = create_booking(
            request.user,
            listing,
            data["check_in"],
            data["check_out"],
            data["guests"],
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, *args, **kwargs):  # type: ignore
        booking = self.get_object()
        booking = cancel_booking(request.user, booking)
        return Response(BookingSerializer(booking).data, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], url_path="my-bookings")
    def my_bookings(self, request):  # type: ignore
        return self.list(request)

    @action(detail=True, methods=["patch"], url_path="status")
    def update_status(self, request, pk=None):  # type: ignore
        booking = self.get_object()
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = change_booking_status(request.user, booking, serializer.validated_data["status"])
        return Response(BookingSerializer(booking).data)
