"""Admin registration for co-host grants."""

from __future__ import annotations

from django.contrib import admin

from .models import CohostPermission


@admin.register(CohostPermission)
class CohostPermissionAdmin(admin.ModelAdmin):
    list_display = (
        "listing",
        "host",
        "cohost",
        "can_edit_listing",
        "can_manage_bookings",
        "can_respond_messages",
        "created_at",
    )
    list_filter = ("can_edit_listing", "can_manage_bookings", "can_respond_messages")
    search_fields = ("listing__title", "host__email", "cohost__email")
    raw_id_fields = ("listing", "host", "cohost")
