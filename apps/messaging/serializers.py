"""Serializers for messaging."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.users.serializers import UserShortSerializer

from .models import Conversation, Message


class MessageSerializer(serializers.ModelSerializer):
    sender = UserShortSerializer(read_only=True)

    class Meta:
        model = Message
        fields = ["id", "conversation", "sender", "content", "created_at", "read_at"]
        read_only_fields = fields


class MessageCreateSerializer(serializers.Serializer):
    content = serializers.CharField(max_length=5000, trim_whitespace=True)


class ConversationStartSerializer(serializers.Serializer):
    listing_id = serializers.IntegerField(min_value=1)


class ConversationSerializer(serializers.ModelSerializer):
    """Conversation as seen by the requesting user (``context["request"]``)."""

    guest = UserShortSerializer(read_only=True)
    host = UserShortSerializer(read_only=True)
    listing_id = serializers.ReadOnlyField(source="listing.id")
    listing_title = serializers.ReadOnlyField(source="listing.title")
    other_user_name = serializers.SerializerMethodField()
    unread_count = serializers.SerializerMethodField()

    class Meta:
        model = Conversation
        fields = [
            "id",
            "listing_id",
            "listing_title",
            "guest",
            "host",
            "other_user_name",
            "unread_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def _viewer(self):
        request = self.context.get("request")
        return getattr(request, "user", None)

    def get_other_user_name(self, obj: Conversation) -> str:
        viewer = self._viewer()
        if viewer is None:
            return ""
        other = obj.get_other_user(viewer)
        return other.full_name or other.email

    def get_unread_count(self, obj: Conversation) -> int:
        annotated = getattr(obj, "unread_count", None)
        if annotated is not None:
            return annotated
        viewer = self._viewer()
        if viewer is None:
            return 0
        return obj.messages.filter(read_at__isnull=True).exclude(sender=viewer).count()
