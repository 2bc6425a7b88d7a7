"""Co-host grant model."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class CohostPermission(models.Model):
    """Capabilities granted by a listing's host to a co-host on that listing."""

    listing = models.ForeignKey(
        "listings.Listing",
        on_delete=models.CASCADE,
        related_name="cohost_permissions",
    )
    host = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="granted_cohost_permissions",
    )
    cohost = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="cohost_grants",
    )
    can_edit_listing = models.BooleanField(default=False)
    can_manage_bookings = models.BooleanField(default=False)
    can_respond_messages = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Co-host permission")
        verbose_name_plural = _("Co-host permissions")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["listing", "cohost"],
                name="cohost_permission_unique_listing_cohost",
            ),
            models.CheckConstraint(
                condition=~models.Q(host=models.F("cohost")),
                name="cohost_permission_not_self",
            ),
        ]
        indexes = [
            models.Index(fields=["cohost"], name="cohost_perm_cohost_idx"),
        ]

    def __str__(self) -> str:
        return f"Co-host {self.cohost_id} on listing {self.listing_id}"
