"""Pytest configuration and shared fixtures."""

import threading
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Any

import pytest
from rest_framework.test import APIClient

from ticketing.domain import (
    Capacity,
    Event,
    EventDraft,
    EventId,
    Money,
    Purchaser,
    Ticket,
    TicketId,
)
from ticketing.domain.errors import EventNotFoundError, StorageFailureError
from ticketing.services import EventService, QrCodeUrlBuilder, TicketService
from ticketing.stores.interfaces import EventStore, TicketStore

EVENT_DATE = datetime(2030, 5, 17, 20, 0, tzinfo=UTC)


class InMemoryStore(EventStore, TicketStore):
    """Store fake holding events and tickets in memory.

    A unit of work holds one lock for its whole duration and restores the
    previous state when the block raises.
    """

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}
        self.tickets: list[Ticket] = []
        self.fail_on_insert: int | None = None
        self._inserts = 0
        self._lock = threading.RLock()

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            events, tickets = dict(self.events), list(self.tickets)
            try:
                yield
            except BaseException:
                self.events, self.tickets = events, tickets
                raise

    def add_event(
        self,
        total_tickets: int = 10,
        ticket_price: str = "25.00",
        title: str = "Tech Conference",
    ) -> Event:
        now = datetime.now(UTC)
        event = Event(
            id=EventId(uuid.uuid4()),
            title=title,
            description="",
            date=EVENT_DATE,
            location="Milan",
            image_url=None,
            total_tickets=Capacity(total_tickets),
            ticket_price=Money(Decimal(ticket_price)),
            created_at=now,
            updated_at=now,
        )
        self.events[event.id] = event
        return event

    def add_sold_tickets(self, event: Event, count: int, user_id: int = 999) -> None:
        for _ in range(count):
            self.tickets.append(
                Ticket(
                    id=TicketId(uuid.uuid4()),
                    event_id=event.id,
                    user_id=user_id,
                    user_email="earlier@example.com",
                    purchase_date=datetime.now(UTC),
                    price=event.ticket_price,
                    event_name=event.title,
                    event_date=event.date,
                    qr_code_url="https://qr.example.com/earlier",
                )
            )

    def list_events(self) -> list[Event]:
        return sorted(self.events.values(), key=lambda event: event.date, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def get_event_for_update(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def count_tickets_for_event(self, event_id: EventId) -> int:
        return sum(1 for ticket in self.tickets if ticket.event_id == event_id)

    def create_event(self, draft: EventDraft) -> Event:
        now = datetime.now(UTC)
        event = Event(
            id=EventId(uuid.uuid4()),
            title=draft.title,
            description=draft.description,
            date=draft.date,
            location=draft.location,
            image_url=draft.image_url,
            total_tickets=draft.total_tickets,
            ticket_price=draft.ticket_price,
            created_at=now,
            updated_at=now,
        )
        self.events[event.id] = event
        return event

    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event:
        event = self.events.get(event_id)
        if event is None:
            raise EventNotFoundError(str(event_id))
        fields = dict(changes)
        if "total_tickets" in fields:
            fields["total_tickets"] = Capacity(fields["total_tickets"])
        if "ticket_price" in fields:
            fields["ticket_price"] = Money(fields["ticket_price"])
        updated = replace(event, updated_at=datetime.now(UTC), **fields)
        self.events[event_id] = updated
        return updated

    def delete_event(self, event_id: EventId) -> bool:
        if self.events.pop(event_id, None) is None:
            return False
        self.tickets = [ticket for ticket in self.tickets if ticket.event_id != event_id]
        return True

    def insert_ticket(self, ticket: Ticket) -> None:
        self._inserts += 1
        if self.fail_on_insert is not None and self._inserts == self.fail_on_insert:
            raise StorageFailureError()
        self.tickets.append(ticket)

    def list_tickets(self) -> list[Ticket]:
        return sorted(self.tickets, key=lambda ticket: ticket.purchase_date, reverse=True)

    def list_tickets_for_user(self, user_id: int) -> list[Ticket]:
        return [ticket for ticket in self.list_tickets() if ticket.user_id == user_id]


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def ticket_service(store: InMemoryStore) -> TicketService:
    return TicketService(store, QrCodeUrlBuilder())


@pytest.fixture
def event_service(store: InMemoryStore) -> EventService:
    return EventService(store)


@pytest.fixture
def buyer() -> Purchaser:
    return Purchaser(id=1, email="buyer@example.com")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="buyer", email="buyer@example.com", password="secret-pass"
    )


@pytest.fixture
def staff_user(django_user_model):
    return django_user_model.objects.create_user(
        username="admin", email="admin@example.com", password="secret-pass", is_staff=True
    )


@pytest.fixture
def make_event(db):
    from ticketing.models import Event as EventRow

    def make(total_tickets: int = 10, ticket_price: str = "25.00", **fields) -> EventRow:
        fields.setdefault("title", "Tech Conference")
        fields.setdefault("date", EVENT_DATE + timedelta(days=EventRow.objects.count()))
        return EventRow.objects.create(
            total_tickets=total_tickets,
            ticket_price=Decimal(ticket_price),
            **fields,
        )

    return make


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()
