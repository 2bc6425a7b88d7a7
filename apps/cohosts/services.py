"""Domain services for co-host grants."""

from __future__ import annotations

import structlog
from django.contrib.auth import get_user_model  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore

from shared.domain.errors import ConflictError, NotFoundError, ValidationError
from shared.infrastructure.db import persistence_guard

from .authorization import Action, find_cohost_permission, require
from .models import CohostPermission

logger = structlog.get_logger(__name__)

CAPABILITY_FIELDS = ("can_edit_listing", "can_manage_bookings", "can_respond_messages")


def find_cohost_permissions_for_user(user_id: int) -> list[CohostPermission]:
    """Every grant held by ``user_id`` as a co-host."""
    with persistence_guard():
        return list(
            CohostPermission.objects.filter(cohost_id=user_id).select_related("listing", "host")
        )


def find_cohost_permissions_for_host(host_id: int) -> list[CohostPermission]:
    """Every grant on listings hosted by ``host_id``."""
    with persistence_guard():
        return list(
            CohostPermission.objects.filter(listing__host_id=host_id).select_related(
                "listing", "cohost"
            )
        )


def insert_cohost_permission(listing, cohost, **flags: bool) -> CohostPermission:
    """Persist a new grant; a duplicate (listing, cohost) pair is a conflict."""
    capabilities = {field: bool(flags.get(field, False)) for field in CAPABILITY_FIELDS}
    try:
        with persistence_guard(), transaction.atomic():
            return CohostPermission.objects.create(
                listing=listing,
                host_id=listing.host_id,
                cohost=cohost,
                **capabilities,
            )
    except IntegrityError as exc:
        raise ConflictError(
            "COHOST_EXISTS", "This user is already a co-host of the listing."
        ) from exc


def delete_cohost_permission(permission_id: int) -> None:
    with persistence_guard():
        CohostPermission.objects.filter(pk=permission_id).delete()


def grant_cohost_permission(actor, listing, cohost_id: int, **flags: bool) -> CohostPermission:
    """Let the host of ``listing`` grant capabilities on it to another user."""
    require(actor, Action.COHOST_MANAGE, listing)

    user_model = get_user_model()
    cohost = user_model.objects.filter(pk=cohost_id).first()
    if cohost is None:
        raise NotFoundError("NOT_FOUND", "User not found.")
    if cohost.pk == listing.host_id:
        raise ValidationError("SELF_GRANT", "A host cannot be a co-host of their own listing.")
    if find_cohost_permission(listing.pk, cohost.pk) is not None:
        raise ConflictError("COHOST_EXISTS", "This user is already a co-host of the listing.")

    permission = insert_cohost_permission(listing, cohost, **flags)
    logger.info(
        "cohost.granted",
        permission_id=permission.pk,
        listing_id=listing.pk,
        cohost_id=cohost.pk,
    )
    return permission


def update_cohost_permission(actor, permission: CohostPermission, **flags: bool) -> CohostPermission:
    """Change the capability flags of a grant; omitted flags keep their value."""
    require(actor, Action.COHOST_MANAGE, permission)

    changed: list[str] = []
    for field in CAPABILITY_FIELDS:
        if field in flags and flags[field] is not None:
            setattr(permission, field, bool(flags[field]))
            changed.append(field)
    if changed:
        with persistence_guard():
            permission.save(update_fields=changed)
        logger.info("cohost.updated", permission_id=permission.pk, fields=changed)
    return permission


def revoke_cohost_permission(actor, permission: CohostPermission) -> None:
    require(actor, Action.COHOST_MANAGE, permission)
    permission_id = permission.pk
    delete_cohost_permission(permission_id)
    logger.info(
        "cohost.revoked",
        permission_id=permission_id,
        listing_id=permission.listing_id,
        cohost_id=permission.cohost_id,
    )


__all__ = [
    "CAPABILITY_FIELDS",
    "delete_cohost_permission",
    "find_cohost_permission",
    "find_cohost_permissions_for_host",
    "find_cohost_permissions_for_user",
    "grant_cohost_permission",
    "insert_cohost_permission",
    "revoke_cohost_permission",
    "update_cohost_permission",
]
