"""Serializers for co-host grants."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer

from .models import CohostPermission


class CohostPermissionSerializer(serializers.ModelSerializer):
    cohost = UserShortSerializer(read_only=True)
    cohost_email = serializers.ReadOnlyField(source="cohost.email")
    listing_title = serializers.ReadOnlyField(source="listing.title")

    class Meta:
        model = CohostPermission
        fields = [
            "id",
            "listing",
            "listing_title",
            "host",
            "cohost",
            "cohost_email",
            "can_edit_listing",
            "can_manage_bookings",
            "can_respond_messages",
            "created_at",
        ]
        read_only_fields = fields


class CohostPermissionCreateSerializer(serializers.Serializer):
    listing_id = serializers.IntegerField(min_value=1)
    cohost_id = serializers.IntegerField(min_value=1)
    can_edit_listing = serializers.BooleanField(default=False)
    can_manage_bookings = serializers.BooleanField(default=False)
    can_respond_messages = serializers.BooleanField(default=False)


class CohostPermissionUpdateSerializer(serializers.Serializer):
    can_edit_listing = serializers.BooleanField(required=False)
    can_manage_bookings = serializers.BooleanField(required=False)
    can_respond_messages = serializers.BooleanField(required=False)
