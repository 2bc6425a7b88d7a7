"""
Booking status state machine

pending -> confirmed            host or co-host with can_manage_bookings
pending | confirmed -> cancelled guest, host or co-host with can_manage_bookings
pending | confirmed -> completed staff only, through the admin operation

cancelled and completed are terminal.
"""

from __future__ import annotations

from enum import Enum

from shared.domain.errors import ValidationError


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class Actor(str, Enum):
    """Capacity in which a user drives a transition."""

    GUEST = "guest"
    HOST = "host"
    COHOST = "cohost"
    STAFF = "staff"


# Only these statuses hold dates on the calendar
BLOCKING_STATUSES = frozenset({BookingStatus.PENDING, BookingStatus.CONFIRMED})

TRANSITIONS: dict[tuple[BookingStatus, BookingStatus], frozenset[Actor]] = {
    (BookingStatus.PENDING, BookingStatus.CONFIRMED): frozenset({Actor.HOST, Actor.COHOST}),
    (BookingStatus.PENDING, BookingStatus.CANCELLED): frozenset(
        {Actor.GUEST, Actor.HOST, Actor.COHOST}
    ),
    (BookingStatus.CONFIRMED, BookingStatus.CANCELLED): frozenset(
        {Actor.GUEST, Actor.HOST, Actor.COHOST}
    ),
    (BookingStatus.PENDING, BookingStatus.COMPLETED): frozenset({Actor.STAFF}),
    (BookingStatus.CONFIRMED, BookingStatus.COMPLETED): frozenset({Actor.STAFF}),
}


class TransitionNotAllowed(ValidationError):
    default_code = "INVALID_TRANSITION"
    default_message = "This status change is not allowed."


def is_valid_transition(current: str, target: str) -> bool:
    return (BookingStatus(current), BookingStatus(target)) in TRANSITIONS


def allowed_actors(current: str, target: str) -> frozenset[Actor]:
    """Actors that may move a booking from ``current`` to ``target``.

    Raises ``TransitionNotAllowed`` when no actor may.
    """
    try:
        key = (BookingStatus(current), BookingStatus(target))
    except ValueError as exc:
        raise ValidationError("INVALID_STATUS", f"Unknown booking status: {target!r}.") from exc
    actors = TRANSITIONS.get(key)
    if actors is None:
        raise TransitionNotAllowed(
            message=f"Cannot move a booking from {key[0].value} to {key[1].value}."
        )
    return actors


__all__ = [
    "Actor",
    "BLOCKING_STATUSES",
    "BookingStatus",
    "TRANSITIONS",
    "TransitionNotAllowed",
    "allowed_actors",
    "is_valid_transition",
]
