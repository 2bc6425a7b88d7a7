"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """Profile of a user; ``role`` is derived and read-only."""

    role = serializers.CharField(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "first_name",
            "last_name",
            "role",
            "is_host",
            "created_at",
        ]
        read_only_fields = [
            "id",
            "email",
            "role",
            "is_host",
            "created_at",
        ]


class UserShortSerializer(serializers.ModelSerializer):
    """Public card of a user embedded in other resources."""

    class Meta:
        model = User
        fields = ["id", "first_name", "last_name"]


class UserLookupSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "email", "first_name", "last_name"]
