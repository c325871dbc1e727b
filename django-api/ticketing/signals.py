"""Django signals for cache invalidation.

Invalidation runs once the surrounding transaction commits. A reader that
fills the cache before the commit sees the old state, so clearing earlier
would leave stale availability cached.
"""

from functools import partial

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from ticketing.cache import invalidate_event
from ticketing.models import Event, Ticket


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    transaction.on_commit(partial(invalidate_event, instance.pk))


@receiver([post_save, post_delete], sender=Ticket)
def invalidate_ticket_event_cache(sender, instance, **kwargs):
    """Invalidate the owning event's caches, whose availability just changed."""
    transaction.on_commit(partial(invalidate_event, instance.event_id))
