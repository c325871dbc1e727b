"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

import pytest
from django.core.cache import cache
from django.utils import timezone

from ticketing.cache import EVENT_LIST_KEY, event_detail_key
from ticketing.models import Ticket


def make_ticket(event, user) -> Ticket:
    return Ticket.objects.create(
        event=event,
        user=user,
        user_email=user.email,
        purchase_date=timezone.now(),
        price=event.ticket_price,
        event_name=event.title,
        event_date=event.date,
        qr_code_url="https://qr.example.com/ticket",
    )


class TestCacheKeys:
    """Tests for cache key construction."""

    def test_detail_key_is_canonical(self):
        raw = "7D3C5A9E-2F4B-4F7E-9D6A-0C1B2A3D4E5F"
        assert event_detail_key(raw) == f"events:{raw.lower()}"

    def test_detail_key_for_invalid_id_is_none(self):
        assert event_detail_key("event-01") is None


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_cache(self, make_event, django_capture_on_commit_callbacks):
        """Saving an event invalidates the events:list cache key."""
        event = make_event()
        cache.set(EVENT_LIST_KEY, ["stale"])

        with django_capture_on_commit_callbacks(execute=True):
            event.title = "Renamed"
            event.save()

        assert cache.get(EVENT_LIST_KEY) is None

    def test_event_save_invalidates_detail_cache(self, make_event, django_capture_on_commit_callbacks):
        """Saving an event invalidates the events:{id} cache key."""
        event = make_event()
        cache.set(event_detail_key(event.id), {"stale": True})

        with django_capture_on_commit_callbacks(execute=True):
            event.save()

        assert cache.get(event_detail_key(event.id)) is None

    def test_event_delete_invalidates_caches(self, make_event, django_capture_on_commit_callbacks):
        event = make_event()
        key = event_detail_key(event.id)
        cache.set(EVENT_LIST_KEY, ["stale"])
        cache.set(key, {"stale": True})

        with django_capture_on_commit_callbacks(execute=True):
            event.delete()

        assert cache.get(EVENT_LIST_KEY) is None
        assert cache.get(key) is None

    def test_ticket_save_invalidates_detail_cache(
        self, make_event, user, django_capture_on_commit_callbacks
    ):
        """Issuing a ticket invalidates its event's detail cache."""
        event = make_event()
        other = make_event()
        cache.set(event_detail_key(event.id), {"stale": True})
        cache.set(event_detail_key(other.id), {"fresh": True})

        with django_capture_on_commit_callbacks(execute=True):
            make_ticket(event, user)

        assert cache.get(event_detail_key(event.id)) is None
        assert cache.get(event_detail_key(other.id)) == {"fresh": True}

    def test_ticket_delete_invalidates_detail_cache(
        self, make_event, user, django_capture_on_commit_callbacks
    ):
        event = make_event()
        ticket = make_ticket(event, user)
        cache.set(event_detail_key(event.id), {"stale": True})

        with django_capture_on_commit_callbacks(execute=True):
            ticket.delete()

        assert cache.get(event_detail_key(event.id)) is None

    def test_invalidation_waits_for_commit(self, make_event, user, django_capture_on_commit_callbacks):
        """Caches are left alone until the transaction that changed them commits."""
        event = make_event()
        cache.set(event_detail_key(event.id), {"stale": True})

        with django_capture_on_commit_callbacks() as callbacks:
            make_ticket(event, user)

        assert cache.get(event_detail_key(event.id)) == {"stale": True}
        assert len(callbacks) == 1
