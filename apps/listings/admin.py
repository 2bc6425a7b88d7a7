"""Admin registration for listings."""

from __future__ import annotations

from django.contrib import admin

from .models import Listing


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "host",
        "city",
        "country",
        "price_per_night",
        "currency",
        "max_guests",
        "created_at",
    )
    list_filter = ("country", "currency")
    search_fields = ("title", "city", "address", "host__email")
    raw_id_fields = ("host",)
    readonly_fields = ("created_at", "updated_at")
