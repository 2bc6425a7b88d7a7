"""Messaging API views."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.cohosts.authorization import Action
from apps.cohosts.permissions import ResolverPermission
from apps.listings.services import find_listing_by_id

from .models import Conversation
from .serializers import (
    ConversationSerializer,
    ConversationStartSerializer,
    MessageCreateSerializer,
    MessageSerializer,
)
from .services import (
    conversations_for_user,
    list_messages,
    mark_read,
    send_message,
    start_conversation,
    unread_total,
)


class ConversationViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet,
):
    """Conversations of the authenticated user and their messages."""

    queryset = Conversation.objects.select_related("listing", "guest", "host")
    serializer_class = ConversationSerializer
    permission_classes = [permissions.IsAuthenticated, ResolverPermission]
    authorization_actions = {"retrieve": Action.CONVERSATION_READ}

    def get_queryset(self):  # type: ignore
        if self.action == "list":
            return conversations_for_user(self.request.user)
        return super().get_queryset()

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = ConversationStartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        listing = find_listing_by_id(serializer.validated_data["listing_id"])
        conversation, created = start_conversation(request.user, listing)
        data = ConversationSerializer(conversation, context=self.get_serializer_context()).data
        return Response(data, status=status.HTTP_201_CREATED if created else status.HTTP_200_OK)

    @action(detail=True, methods=["get", "post"], url_path="messages")
    def messages(self, request, pk=None):  # type: ignore
        conversation = self.get_object()
        if request.method == "POST":
            serializer = MessageCreateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            message = send_message(request.user, conversation, serializer.validated_data["content"])
            return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)

        messages = list_messages(request.user, conversation)
        return Response(MessageSerializer(messages, many=True).data)

    @action(detail=True, methods=["post"], url_path="read")
    def read(self, request, pk=None):  # type: ignore
        conversation = self.get_object()
        updated = mark_read(request.user, conversation)
        return Response({"marked_read": updated})

    @action(detail=False, methods=["get"], url_path="unread-count")
    def unread_count(self, request):  # type: ignore
        return Response({"unread_count": unread_total(request.user)})
