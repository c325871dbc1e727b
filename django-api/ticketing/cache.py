"""Cache keys for event responses."""

from uuid import UUID

from django.core.cache import cache

EVENT_LIST_KEY = "events:list"


def event_detail_key(event_id: object) -> str | None:
    """Return the detail cache key, or None when the ID is not a UUID."""
    try:
        return f"events:{UUID(str(event_id))}"
    except ValueError:
        return None


def invalidate_event(event_id: object) -> None:
    keys = [EVENT_LIST_KEY]
    detail_key = event_detail_key(event_id)
    if detail_key is not None:
        keys.append(detail_key)
    cache.delete_many(keys)
