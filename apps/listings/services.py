"""Domain services for listings."""

from __future__ import annotations

from typing import Any

import structlog
from django.db.models import Q, QuerySet  # type: ignore

from apps.cohosts.authorization import Action, require
from shared.domain.errors import AuthenticationRequiredError, AuthorizationError, NotFoundError
from shared.infrastructure.db import persistence_guard

from .models import Listing

logger = structlog.get_logger(__name__)

EDITABLE_FIELDS = (
    "title",
    "description",
    "address",
    "city",
    "country",
    "price_per_night",
    "currency",
    "max_guests",
    "bedrooms",
    "bathrooms",
    "images",
    "amenities",
    "rules",
)


def find_listing_by_id(listing_id: int) -> Listing:
    with persistence_guard():
        listing = Listing.objects.select_related("host").filter(pk=listing_id).first()
    if listing is None:
        raise NotFoundError("NOT_FOUND", "Listing not found.")
    return listing


def listings_managed_by(user) -> QuerySet:
    """Listings the user hosts or holds a co-host grant on."""
    return (
        Listing.objects.select_related("host")
        .filter(Q(host=user) | Q(cohost_permissions__cohost=user))
        .distinct()
    )


def create_listing(actor, **data: Any) -> Listing:
    """Create a listing hosted by ``actor``; only hosts and co-hosts may list."""
    if not getattr(actor, "is_authenticated", False):
        raise AuthenticationRequiredError()
    if actor.role not in {actor.Role.HOST, actor.Role.COHOST}:
        raise AuthorizationError(message="Only hosts and co-hosts can create listings.")

    fields = {key: value for key, value in data.items() if key in EDITABLE_FIELDS}
    with persistence_guard():
        listing = Listing.objects.create(host=actor, **fields)
    logger.info("listing.created", listing_id=listing.pk, host_id=actor.pk)
    return listing


def update_listing(actor, listing: Listing, **data: Any) -> Listing:
    require(actor, Action.LISTING_EDIT, listing)

    changed = [key for key in data if key in EDITABLE_FIELDS]
    for key in changed:
        setattr(listing, key, data[key])
    if changed:
        with persistence_guard():
            listing.save(update_fields=[*changed, "updated_at"])
        logger.info("listing.updated", listing_id=listing.pk, actor_id=actor.pk, fields=changed)
    return listing


def delete_listing(actor, listing: Listing) -> None:
    require(actor, Action.LISTING_DELETE, listing)
    listing_id = listing.pk
    with persistence_guard():
        listing.delete()
    logger.info("listing.deleted", listing_id=listing_id, actor_id=actor.pk)


__all__ = [
    "EDITABLE_FIELDS",
    "create_listing",
    "delete_listing",
    "find_listing_by_id",
    "listings_managed_by",
    "update_listing",
]
