"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin, messages
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.errors import DomainError

from .models import Booking
from .services import complete_booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "listing",
        "guest",
        "status",
        "check_in",
        "check_out",
        "guests",
        "total_price",
        "currency",
        "created_at",
    )
    list_filter = ("status", "check_in", "check_out")
    search_fields = ("listing__title", "guest__email")
    # Writes go through apps.bookings.services
    readonly_fields = (
        "listing",
        "guest",
        "check_in",
        "check_out",
        "guests",
        "status",
        "total_price",
        "currency",
        "created_at",
        "updated_at",
    )
    actions = ["mark_completed"]

    def has_add_permission(self, request):  # type: ignore
        return False

    @admin.action(description=_("Mark selected bookings as completed"))
    def mark_completed(self, request, queryset):  # type: ignore
        completed = 0
        for booking in queryset:
            try:
                complete_booking(request.user, booking)
            except DomainError as exc:
                self.message_user(request, f"Booking #{booking.pk}: {exc.message}", messages.WARNING)
            else:
                completed += 1
        if completed:
            self.message_user(request, f"{completed} booking(s) marked as completed.", messages.SUCCESS)
