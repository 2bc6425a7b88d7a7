"""Database helpers shared by the service layer."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from django.db import transaction  # type: ignore
from django.db.utils import InterfaceError, OperationalError  # type: ignore

from shared.domain.errors import InfrastructureError


@contextmanager
def persistence_guard() -> Iterator[None]:
    """Translate connection-level database failures into InfrastructureError.

    Integrity and programming errors are left alone: they are bugs or
    constraint violations the caller handles explicitly.
    """
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        raise InfrastructureError(message=f"Database unavailable: {exc}") from exc


def lock_queryset_if_possible(queryset):
    """Row-lock ``queryset`` for the rest of the current atomic block.

    Outside ``transaction.atomic()`` the queryset is returned unchanged.
    SQLite has no row locks and ignores ``select_for_update``; there the
    settings open every transaction with ``BEGIN IMMEDIATE`` so writers
    serialize on the database lock instead (``SQLITE_OPTIONS``).
    """
    if not transaction.get_connection().in_atomic_block:
        return queryset
    return queryset.select_for_update()
