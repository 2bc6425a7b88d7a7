"""Serializers for the listings domain."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer
from shared.domain.value_objects import CURRENCY_MINOR_UNITS

from .models import Listing


class ListingSerializer(serializers.ModelSerializer):
    host = UserShortSerializer(read_only=True)

    class Meta:
        model = Listing
        fields = [
            "id",
            "host",
            "title",
            "description",
            "address",
            "city",
            "country",
            "price_per_night",
            "currency",
            "max_guests",
            "bedrooms",
            "bathrooms",
            "images",
            "amenities",
            "rules",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ListingWriteSerializer(serializers.ModelSerializer):
    """Input for create and partial update; the host is never client-supplied."""

    price_per_night = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.00")
    )
    max_guests = serializers.IntegerField(min_value=1)
    images = serializers.ListField(child=serializers.CharField(), required=False)
    amenities = serializers.ListField(child=serializers.CharField(), required=False)

    class Meta:
        model = Listing
        fields = [
            "title",
            "description",
            "address",
            "city",
            "country",
            "price_per_night",
            "currency",
            "max_guests",
            "bedrooms",
            "bathrooms",
            "images",
            "amenities",
            "rules",
        ]
        extra_kwargs = {
            "currency": {"required": False},
            "rules": {"required": False, "allow_blank": True},
        }

    def validate_currency(self, value: str) -> str:
        code = value.upper()
        if code not in CURRENCY_MINOR_UNITS:
            raise serializers.ValidationError(f"Unsupported currency: {value}.")
        return code
