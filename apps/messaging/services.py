"""Domain services for conversations and messages."""

from __future__ import annotations

import structlog
from django.db import transaction  # type: ignore
from django.db.models import Count, Q, QuerySet  # type: ignore
from django.utils import timezone  # type: ignore

from apps.cohosts.authorization import Action, require
from apps.cohosts.models import CohostPermission
from shared.domain.errors import NotFoundError, ValidationError
from shared.infrastructure.db import persistence_guard

from .models import Conversation, Message

logger = structlog.get_logger(__name__)

MAX_MESSAGE_LENGTH = 5000


def find_conversation_by_id(conversation_id: int) -> Conversation:
    with persistence_guard():
        conversation = (
            Conversation.objects.select_related("listing", "guest", "host")
            .filter(pk=conversation_id)
            .first()
        )
    if conversation is None:
        raise NotFoundError("NOT_FOUND", "Conversation not found.")
    return conversation


def _visible_to(user) -> Q:
    answered_listings = CohostPermission.objects.filter(
        cohost=user, can_respond_messages=True
    ).values("listing_id")
    return Q(guest=user) | Q(host=user) | Q(listing_id__in=answered_listings)


def conversations_for_user(user) -> QuerySet:
    """Conversations the user takes part in or answers for as co-host.

    Each row carries ``unread_count``: messages from others not yet read.
    """
    unread = Q(messages__read_at__isnull=True) & ~Q(messages__sender=user)
    return (
        Conversation.objects.select_related("listing", "guest", "host")
        .filter(_visible_to(user))
        .annotate(unread_count=Count("messages", filter=unread))
    )


def start_conversation(user, listing) -> tuple[Conversation, bool]:
    """Return the user's conversation with the listing's host, creating it if needed."""
    require(user, Action.CONVERSATION_CREATE, listing)
    with persistence_guard():
        conversation, created = Conversation.objects.get_or_create(
            listing=listing,
            guest=user,
            host_id=listing.host_id,
        )
    if created:
        logger.info(
            "conversation.created",
            conversation_id=conversation.pk,
            listing_id=listing.pk,
            guest_id=user.pk,
        )
    return conversation, created


def mark_read(user, conversation: Conversation) -> int:
    """Stamp ``read_at`` on every unread message not sent by ``user``."""
    require(user, Action.CONVERSATION_READ, conversation)
    with persistence_guard():
        updated = (
            Message.objects.filter(conversation=conversation, read_at__isnull=True)
            .exclude(sender=user)
            .update(read_at=timezone.now())
        )
    if updated:
        logger.info(
            "conversation.marked_read",
            conversation_id=conversation.pk,
            reader_id=user.pk,
            count=updated,
        )
    return updated


def list_messages(user, conversation: Conversation) -> list[Message]:
    """Messages of the conversation, oldest first; reading marks them read."""
    mark_read(user, conversation)
    with persistence_guard():
        return list(conversation.messages.select_related("sender"))


def send_message(user, conversation: Conversation, content: str) -> Message:
    require(user, Action.MESSAGE_SEND, conversation)

    content = (content or "").strip()
    if not content:
        raise ValidationError("EMPTY_MESSAGE", "Message content cannot be empty.")
    if len(content) > MAX_MESSAGE_LENGTH:
        raise ValidationError(
            "MESSAGE_TOO_LONG", f"Messages are limited to {MAX_MESSAGE_LENGTH} characters."
        )

    with persistence_guard(), transaction.atomic():
        message = Message.objects.create(conversation=conversation, sender=user, content=content)
        Conversation.objects.filter(pk=conversation.pk).update(updated_at=timezone.now())

    logger.info(
        "message.sent",
        message_id=message.pk,
        conversation_id=conversation.pk,
        sender_id=user.pk,
    )
    return message


def unread_total(user) -> int:
    """Unread messages across every conversation visible to the user."""
    visible = Conversation.objects.filter(_visible_to(user)).values("pk")
    with persistence_guard():
        return (
            Message.objects.filter(conversation_id__in=visible, read_at__isnull=True)
            .exclude(sender=user)
            .count()
        )


__all__ = [
    "conversations_for_user",
    "find_conversation_by_id",
    "list_messages",
    "mark_read",
    "send_message",
    "start_conversation",
    "unread_total",
]
