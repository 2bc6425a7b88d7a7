"""Model signal handlers for listing cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .cache import invalidate_listing_cache
from .models import Listing


@receiver([post_save, post_delete], sender=Listing)
def listing_cache_invalidator(sender, instance, **_: object) -> None:
    """Invalidate cached listing reads whenever listing data changes."""
    invalidate_listing_cache(instance.pk)
