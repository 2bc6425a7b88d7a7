"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer
from shared.domain.value_objects import Money

from .models import Booking


class BookingCreateSerializer(serializers.Serializer):
    """Booking request from a guest.

    Only the shape is checked here; dates, capacity and conflicts are the
    availability engine's job so the client always gets the same error codes.
    """

    listing_id = serializers.IntegerField(min_value=1)
    check_in = serializers.DateField()
    check_out = serializers.DateField()
    guests = serializers.IntegerField(min_value=1, default=1)


class BookingStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Booking.Status.choices)


class BookingSerializer(serializers.ModelSerializer):
    guest = UserShortSerializer(read_only=True)
    listing_id = serializers.ReadOnlyField(source="listing.id")
    listing_title = serializers.ReadOnlyField(source="listing.title")
    nights = serializers.IntegerField(read_only=True)
    total_price = serializers.SerializerMethodField()

    class Meta:
        model = Booking
        fields = [
            "id",
            "listing_id",
            "listing_title",
            "guest",
            "check_in",
            "check_out",
            "nights",
            "guests",
            "total_price",
            "currency",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_total_price(self, obj: Booking) -> str:
        # Stored with three decimals; render in the currency's own precision
        return str(Money(obj.total_price, obj.currency).amount)
