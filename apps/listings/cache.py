"""Read-through cache for listing reads.

Entries are keyed either by listing id (detail reads) or by a digest of the
normalized filter set (search pages). The cache is advisory: when disabled
or empty every read falls through to the database with identical results.
Any listing create/update/delete invalidates it synchronously (see
``signals.py``).
"""

from __future__ import annotations

import hashlib
from typing import Any, Callable, Dict, List, TypeVar

from django.conf import settings
from django.core.cache import cache

T = TypeVar("T")


def _prefix() -> str:
    return getattr(settings, "LISTING_CACHE_PREFIX", "minibnb:listings")


def _keys_registry() -> str:
    return f"{_prefix()}:search_keys"


def _is_cache_enabled() -> bool:
    return getattr(settings, "LISTING_CACHE_ENABLED", False)


def _timeout() -> int:
    return getattr(settings, "LISTING_CACHE_TIMEOUT", 300)


def build_search_key(filters: Dict[str, Any]) -> str:
    normalized_parts = [f"{key}={filters[key]}" for key in sorted(filters)]
    fingerprint = "|".join(normalized_parts)
    digest = hashlib.sha1(fingerprint.encode("utf-8")).hexdigest()
    return f"{_prefix()}:search:{digest}"


def build_detail_key(listing_id: int) -> str:
    return f"{_prefix()}:detail:{listing_id}"


def _register_search_key(key: str) -> None:
    registry = _keys_registry()
    keys: List[str] | None = cache.get(registry)
    if keys is None:
        cache.set(registry, [key], None)
        return
    if key in keys:
        return
    keys.append(key)
    cache.set(registry, keys, None)


def get_or_build_search(filters: Dict[str, Any], builder: Callable[[], T]) -> T:
    """Return the cached search payload for ``filters`` or build and store it."""
    if not _is_cache_enabled():
        return builder()

    key = build_search_key(filters)
    cached = cache.get(key)
    if cached is not None:
        return cached

    result = builder()
    cache.set(key, result, _timeout())
    _register_search_key(key)
    return result


def get_or_build_detail(listing_id: int, builder: Callable[[], T]) -> T:
    """Return the cached detail payload for one listing or build and store it."""
    if not _is_cache_enabled():
        return builder()

    key = build_detail_key(listing_id)
    cached = cache.get(key)
    if cached is not None:
        return cached

    result = builder()
    cache.set(key, result, _timeout())
    return result


def invalidate_listing_cache(listing_id: int | None = None) -> None:
    """Drop every cached search page and, if given, one listing's detail entry."""
    registry = _keys_registry()
    keys: List[str] | None = cache.get(registry)
    if keys:
        cache.delete_many(keys)
    cache.delete(registry)
    if listing_id is not None:
        cache.delete(build_detail_key(listing_id))


__all__ = [
    "build_detail_key",
    "build_search_key",
    "get_or_build_detail",
    "get_or_build_search",
    "invalidate_listing_cache",
]
