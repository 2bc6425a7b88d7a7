"""Domain services for booking workflows.

The conflict check and the insert run inside one ``transaction.atomic()``
block holding a row lock on the listing, so two concurrent requests for the
same listing serialize and the second one sees the first one's booking.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

import structlog
from django.db import transaction  # type: ignore
from django.db.models import Q, QuerySet  # type: ignore
from django.utils import timezone  # type: ignore

from apps.cohosts.authorization import Action, has_cohost_capability, require
from apps.listings.models import Listing
from apps.listings.services import find_listing_by_id
from shared.domain.errors import AuthorizationError, NotFoundError
from shared.domain.value_objects import DateRange
from shared.infrastructure.db import lock_queryset_if_possible, persistence_guard

from .domain.availability import StayQuote, quote_stay
from .domain.status import Actor, allowed_actors
from .models import Booking

logger = structlog.get_logger(__name__)


# --- Persistence ----------------------------------------------------------
def find_bookings_for_listing_in_statuses(
    listing_id: int,
    statuses: Iterable[str],
    *,
    overlapping: DateRange | None = None,
) -> list[Booking]:
    """Bookings of one listing in the given statuses, optionally only those overlapping a range."""
    qs = Booking.objects.filter(listing_id=listing_id, status__in=list(statuses))
    if overlapping is not None:
        qs = qs.filter(
            Q(check_in__lt=overlapping.end_date) & Q(check_out__gt=overlapping.start_date)
        )
    with persistence_guard():
        return list(qs)


def insert_booking(
    *,
    listing: Listing,
    guest,
    check_in: date,
    check_out: date,
    guests: int,
    quote: StayQuote,
) -> Booking:
    with persistence_guard():
        return Booking.objects.create(
            listing=listing,
            guest=guest,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            total_price=quote.total_price,
            currency=quote.currency,
            status=Booking.Status.PENDING,
        )


def update_booking_status(booking: Booking, status: str) -> Booking:
    booking.status = status
    with persistence_guard():
        booking.save(update_fields=["status", "updated_at"])
    return booking


def _lock_listing(listing_id: int) -> Listing:
    listing = lock_queryset_if_possible(Listing.objects.filter(pk=listing_id)).first()
    if listing is None:
        raise NotFoundError("NOT_FOUND", "Listing not found.")
    return listing


def _lock_booking(booking_id: int) -> Booking:
    qs = Booking.objects.select_related("listing").filter(pk=booking_id)
    booking = lock_queryset_if_possible(qs).first()
    if booking is None:
        raise NotFoundError("NOT_FOUND", "Booking not found.")
    return booking


# --- Availability ---------------------------------------------------------
def check_and_price(
    listing: Listing,
    check_in: date,
    check_out: date,
    guests: int,
    *,
    today: date | None = None,
) -> StayQuote:
    """Validate a stay against the listing's blocking bookings and price it.

    Raises ``ValidationError`` (PAST_DATE, INVALID_RANGE, CAPACITY_EXCEEDED)
    or ``ConflictError`` (DATE_CONFLICT). Reads only.
    """
    booked = [
        booking.dates
        for booking in find_bookings_for_listing_in_statuses(listing.pk, Booking.BLOCKING_STATUSES)
    ]
    return quote_stay(
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        price_per_night=listing.price_per_night,
        currency=listing.currency,
        max_guests=listing.max_guests,
        booked=booked,
        today=today or timezone.localdate(),
    )


def create_booking(
    guest,
    listing: Listing,
    check_in: date,
    check_out: date,
    guests: int,
    *,
    today: date | None = None,
) -> Booking:
    """Create a pending booking once the dates are known to be free."""
    require(guest, Action.BOOKING_CREATE, listing)

    with persistence_guard(), transaction.atomic():
        locked_listing = _lock_listing(listing.pk)
        quote = check_and_price(locked_listing, check_in, check_out, guests, today=today)
        booking = insert_booking(
            listing=locked_listing,
            guest=guest,
            check_in=check_in,
            check_out=check_out,
            guests=guests,
            quote=quote,
        )

    logger.info(
        "booking.created",
        booking_id=booking.pk,
        listing_id=listing.pk,
        guest_id=guest.pk,
        nights=quote.nights,
        total_price=str(quote.total_price),
    )
    return booking


# --- Status transitions ---------------------------------------------------
def actor_capacities(user, booking: Booking) -> set[Actor]:
    """Every capacity in which ``user`` may act on ``booking``."""
    capacities: set[Actor] = set()
    if booking.guest_id == user.pk:
        capacities.add(Actor.GUEST)
    if booking.listing.host_id == user.pk:
        capacities.add(Actor.HOST)
    if has_cohost_capability(user, booking.listing_id, "can_manage_bookings"):
        capacities.add(Actor.COHOST)
    return capacities


def change_booking_status(actor, booking: Booking, status: str) -> Booking:
    """Move ``booking`` to ``status`` on behalf of ``actor``.

    Cancelling an already-cancelled booking returns it unchanged.
    """
    resolver_action = (
        Action.BOOKING_CANCEL if status == Booking.Status.CANCELLED else Action.BOOKING_UPDATE_STATUS
    )
    require(actor, resolver_action, booking)

    with persistence_guard(), transaction.atomic():
        locked = _lock_booking(booking.pk)
        if status == Booking.Status.CANCELLED and locked.status == Booking.Status.CANCELLED:
            return locked

        permitted = allowed_actors(locked.status, status)
        if not permitted & actor_capacities(actor, locked):
            raise AuthorizationError(
                message=f"You cannot move this booking from {locked.status} to {status}."
            )
        previous = locked.status
        update_booking_status(locked, status)

    logger.info(
        "booking.status_changed",
        booking_id=locked.pk,
        actor_id=actor.pk,
        from_status=previous,
        to_status=status,
    )
    return locked


def cancel_booking(actor, booking: Booking) -> Booking:
    return change_booking_status(actor, booking, Booking.Status.CANCELLED)


def complete_booking(actor, booking: Booking) -> Booking:
    """Administrative close-out of a pending or confirmed booking. Staff only."""
    if not getattr(actor, "is_authenticated", False) or not actor.is_staff:
        raise AuthorizationError(message="Only staff can complete bookings.")

    with persistence_guard(), transaction.atomic():
        locked = _lock_booking(booking.pk)
        allowed_actors(locked.status, Booking.Status.COMPLETED)
        previous = locked.status
        update_booking_status(locked, Booking.Status.COMPLETED)

    logger.info(
        "booking.status_changed",
        booking_id=locked.pk,
        actor_id=actor.pk,
        from_status=previous,
        to_status=Booking.Status.COMPLETED.value,
    )
    return locked


# --- Queries --------------------------------------------------------------
def bookings_managed_by(user) -> QuerySet:
    """Bookings on listings the user hosts or co-hosts with can_manage_bookings."""
    return (
        Booking.objects.select_related("listing", "guest")
        .filter(
            Q(listing__host=user)
            | Q(
                listing__cohost_permissions__cohost=user,
                listing__cohost_permissions__can_manage_bookings=True,
            )
        )
        .distinct()
    )


def bookings_of_guest(user) -> QuerySet:
    return Booking.objects.select_related("listing", "guest").filter(guest=user)


__all__ = [
    "actor_capacities",
    "bookings_managed_by",
    "bookings_of_guest",
    "cancel_booking",
    "change_booking_status",
    "check_and_price",
    "complete_booking",
    "create_booking",
    "find_bookings_for_listing_in_statuses",
    "find_listing_by_id",
    "insert_booking",
    "update_booking_status",
]
