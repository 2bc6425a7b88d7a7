"""
Authorization resolver

Decides whether an acting user may perform an action on a listing, a
booking, a conversation or a co-host grant. Direct relationships (host of
the listing, guest of the booking or conversation) are consulted first,
co-host grants second.

The resolver is a pure predicate over the current database snapshot: grants
are re-read on every call and it never writes. ``authorize`` returns a
``Decision``; ``require`` raises the matching domain error instead.

Usage:
    decision = authorize(request.user, Action.BOOKING_UPDATE_STATUS, booking)
    if not decision:
        ...

    require(request.user, Action.LISTING_DELETE, listing)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from shared.domain.errors import (
    AuthenticationRequiredError,
    AuthorizationError,
    NotFoundError,
)

from .models import CohostPermission


class Action(str, Enum):
    LISTING_EDIT = "listing.edit"
    LISTING_DELETE = "listing.delete"
    BOOKING_CREATE = "booking.create"
    BOOKING_READ = "booking.read"
    BOOKING_UPDATE_STATUS = "booking.update_status"
    BOOKING_CANCEL = "booking.cancel"
    CONVERSATION_CREATE = "conversation.create"
    CONVERSATION_READ = "conversation.read"
    MESSAGE_SEND = "message.send"
    COHOST_MANAGE = "cohost.manage"


class DenyReason(str, Enum):
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    UNAUTHENTICATED = "UNAUTHENTICATED"


class Relation(str, Enum):
    """How the acting user relates to the resource when access is granted."""

    HOST = "host"
    GUEST = "guest"
    COHOST = "cohost"
    USER = "user"


@dataclass(frozen=True)
class Decision:
    granted: bool
    relation: Relation | None = None
    reason: DenyReason | None = None

    def __bool__(self) -> bool:
        return self.granted

    @classmethod
    def grant(cls, relation: Relation) -> "Decision":
        return cls(granted=True, relation=relation)

    @classmethod
    def deny(cls, reason: DenyReason = DenyReason.FORBIDDEN) -> "Decision":
        return cls(granted=False, reason=reason)


# Which co-host capability unlocks each action; absent means co-hosts never qualify
COHOST_CAPABILITY: dict[Action, str] = {
    Action.LISTING_EDIT: "can_edit_listing",
    Action.BOOKING_READ: "can_manage_bookings",
    Action.BOOKING_UPDATE_STATUS: "can_manage_bookings",
    Action.BOOKING_CANCEL: "can_manage_bookings",
    Action.CONVERSATION_READ: "can_respond_messages",
    Action.MESSAGE_SEND: "can_respond_messages",
}

LISTING_ACTIONS = {
    Action.LISTING_EDIT,
    Action.LISTING_DELETE,
    Action.BOOKING_CREATE,
    Action.CONVERSATION_CREATE,
    Action.COHOST_MANAGE,
}
BOOKING_ACTIONS = {Action.BOOKING_READ, Action.BOOKING_UPDATE_STATUS, Action.BOOKING_CANCEL}
CONVERSATION_ACTIONS = {Action.CONVERSATION_READ, Action.MESSAGE_SEND}


def find_cohost_permission(listing_id: int, user_id: int) -> CohostPermission | None:
    return CohostPermission.objects.filter(listing_id=listing_id, cohost_id=user_id).first()


def has_cohost_capability(user, listing_id: int, capability: str) -> bool:
    permission = find_cohost_permission(listing_id, user.id)
    return bool(permission and getattr(permission, capability))


def _is_authenticated(user) -> bool:
    return user is not None and getattr(user, "is_authenticated", False)


def _listing_decision(user, action: Action, listing) -> Decision:
    is_host = listing.host_id == user.id

    if action in (Action.BOOKING_CREATE, Action.CONVERSATION_CREATE):
        # A host cannot book or message their own listing
        if is_host:
            return Decision.deny()
        return Decision.grant(Relation.USER)

    if is_host:
        return Decision.grant(Relation.HOST)

    capability = COHOST_CAPABILITY.get(action)
    if capability and has_cohost_capability(user, listing.pk, capability):
        return Decision.grant(Relation.COHOST)
    return Decision.deny()


def _booking_decision(user, action: Action, booking) -> Decision:
    if booking.guest_id == user.id:
        return Decision.grant(Relation.GUEST)
    if booking.listing.host_id == user.id:
        return Decision.grant(Relation.HOST)
    if has_cohost_capability(user, booking.listing_id, COHOST_CAPABILITY[action]):
        return Decision.grant(Relation.COHOST)
    return Decision.deny()


def _conversation_decision(user, action: Action, conversation) -> Decision:
    if conversation.guest_id == user.id:
        return Decision.grant(Relation.GUEST)
    if conversation.host_id == user.id:
        return Decision.grant(Relation.HOST)
    if has_cohost_capability(user, conversation.listing_id, COHOST_CAPABILITY[action]):
        return Decision.grant(Relation.COHOST)
    return Decision.deny()


def authorize(user, action: Action, resource: Any) -> Decision:
    """Return a grant or a deny (with reason) for ``user`` doing ``action`` on ``resource``."""
    if not _is_authenticated(user):
        return Decision.deny(DenyReason.UNAUTHENTICATED)
    if resource is None:
        return Decision.deny(DenyReason.NOT_FOUND)

    action = Action(action)
    if action in LISTING_ACTIONS:
        if isinstance(resource, CohostPermission):
            resource = resource.listing
        return _listing_decision(user, action, resource)
    if action in BOOKING_ACTIONS:
        return _booking_decision(user, action, resource)
    if action in CONVERSATION_ACTIONS:
        return _conversation_decision(user, action, resource)
    raise ValueError(f"Unsupported action: {action!r}")


def require(user, action: Action, resource: Any) -> Decision:
    """Like ``authorize`` but raises the domain error matching the deny reason."""
    decision = authorize(user, action, resource)
    if decision:
        return decision
    if decision.reason is DenyReason.UNAUTHENTICATED:
        raise AuthenticationRequiredError()
    if decision.reason is DenyReason.NOT_FOUND:
        raise NotFoundError()
    if action in (Action.BOOKING_CREATE, Action.CONVERSATION_CREATE):
        raise AuthorizationError(message="You cannot book or message your own listing.")
    raise AuthorizationError()


__all__ = [
    "Action",
    "Decision",
    "DenyReason",
    "Relation",
    "authorize",
    "find_cohost_permission",
    "has_cohost_capability",
    "require",
]
