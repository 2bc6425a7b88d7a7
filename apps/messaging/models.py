"""Messaging domain models for minibnb."""

from __future__ import annotations

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Conversation(models.Model):
    """Thread between a guest and the host of one listing."""

    listing = models.ForeignKey(
        "listings.Listing",
        on_delete=models.CASCADE,
        related_name="conversations",
    )
    guest = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="conversations_as_guest",
    )
    host = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="conversations_as_host",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Conversation")
        verbose_name_plural = _("Conversations")
        ordering = ["-updated_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["listing", "guest", "host"],
                name="conversation_unique_listing_guest_host",
            ),
            models.CheckConstraint(
                condition=~models.Q(guest=models.F("host")),
                name="conversation_different_users",
            ),
        ]
        indexes = [
            models.Index(fields=["guest", "-updated_at"], name="conversation_guest_idx"),
            models.Index(fields=["host", "-updated_at"], name="conversation_host_idx"),
        ]

    def __str__(self) -> str:
        return f"Conversation {self.pk} on listing {self.listing_id}"

    def get_other_user(self, user):
        """The participant opposite ``user``; co-hosts see the guest."""
        if user.pk == self.guest_id:
            return self.host
        return self.guest


class Message(models.Model):
    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name="messages",
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
    )
    content = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    read_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = _("Message")
        verbose_name_plural = _("Messages")
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["conversation", "created_at"], name="message_conv_created_idx"),
            models.Index(fields=["conversation", "read_at"], name="message_conv_read_idx"),
        ]

    def __str__(self) -> str:
        return f"Message {self.pk} from {self.sender_id}"
