"""Listing domain models for minibnb."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


def default_currency() -> str:
    return getattr(settings, "DEFAULT_CURRENCY", "EUR")


class Listing(models.Model):
    """A place offered for short-term rental, owned by a single host."""

    host = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="listings",
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    address = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    country = models.CharField(max_length=100)
    price_per_night = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    currency = models.CharField(max_length=3, default=default_currency)
    max_guests = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])
    bedrooms = models.PositiveSmallIntegerField(default=0)
    bathrooms = models.DecimalField(
        max_digits=4,
        decimal_places=1,
        default=Decimal("0.0"),
        validators=[MinValueValidator(Decimal("0.0"))],
    )
    images = models.JSONField(default=list, blank=True)
    amenities = models.JSONField(default=list, blank=True)
    rules = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Listing")
        verbose_name_plural = _("Listings")
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(max_guests__gte=1),
                name="listing_max_guests_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(price_per_night__gte=0),
                name="listing_price_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["host", "-created_at"], name="listing_host_created_idx"),
            models.Index(fields=["city"], name="listing_city_idx"),
            models.Index(fields=["price_per_night"], name="listing_price_idx"),
        ]

    def __str__(self) -> str:
        return self.title
