"""Admin registration for messaging."""

from __future__ import annotations

from django.contrib import admin

from .models import Conversation, Message


class MessageInline(admin.TabularInline):
    model = Message
    extra = 0
    fields = ("sender", "content", "created_at", "read_at")
    readonly_fields = ("created_at",)
    raw_id_fields = ("sender",)


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ("id", "listing", "guest", "host", "updated_at")
    search_fields = ("listing__title", "guest__email", "host__email")
    raw_id_fields = ("listing", "guest", "host")
    inlines = [MessageInline]


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ("id", "conversation", "sender", "created_at", "read_at")
    list_filter = ("read_at",)
    search_fields = ("content", "sender__email")
    raw_id_fields = ("conversation", "sender")
