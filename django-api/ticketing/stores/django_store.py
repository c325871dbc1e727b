"""Django ORM implementations of the ticketing stores."""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from django.db import DatabaseError, transaction

from ticketing import models
from ticketing.domain import (
    Capacity,
    Event,
    EventDraft,
    EventId,
    Money,
    Ticket,
    TicketId,
)
from ticketing.domain.errors import EventNotFoundError, StorageFailureError
from ticketing.stores.interfaces import EventStore, TicketStore

logger = logging.getLogger(__name__)


def to_domain_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        description=row.description,
        date=row.date,
        location=row.location,
        image_url=row.image_url,
        total_tickets=Capacity(row.total_tickets),
        ticket_price=Money(row.ticket_price),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_domain_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        event_id=EventId(row.event_id),
        user_id=row.user_id,
        user_email=row.user_email,
        purchase_date=row.purchase_date,
        price=Money(row.price),
        event_name=row.event_name,
        event_date=row.event_date,
        qr_code_url=row.qr_code_url,
    )


class DjangoStore:
    """Operations shared by the Django-backed stores.

    The event row lock is ``SELECT ... FOR UPDATE`` on backends that support
    it. SQLite ignores it; there the database is configured to open
    ``IMMEDIATE`` transactions, which serialize writers for the whole file.
    """

    @contextmanager
    def atomic(self) -> Iterator[None]:
        try:
            with transaction.atomic():
                yield
        except DatabaseError as exc:
            logger.error("Unit of work rolled back: %s", exc, exc_info=True)
            raise StorageFailureError() from exc

    def get_event_for_update(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
        return to_domain_event(row) if row is not None else None

    def count_tickets_for_event(self, event_id: EventId) -> int:
        return models.Ticket.objects.filter(event_id=event_id.value).count()


class DjangoEventStore(DjangoStore, EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [to_domain_event(row) for row in models.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return to_domain_event(row) if row is not None else None

    def create_event(self, draft: EventDraft) -> Event:
        row = models.Event.objects.create(
            title=draft.title,
            description=draft.description,
            date=draft.date,
            location=draft.location,
            image_url=draft.image_url,
            total_tickets=draft.total_tickets.value,
            ticket_price=draft.ticket_price.amount,
        )
        return to_domain_event(row)

    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            raise EventNotFoundError(str(event_id))
        for field, value in changes.items():
            setattr(row, field, value)
        row.save(update_fields=[*changes, "updated_at"])
        return to_domain_event(row)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0


class DjangoTicketStore(DjangoStore, TicketStore):
    """Relational ticket store using Django ORM."""

    def insert_ticket(self, ticket: Ticket) -> None:
        models.Ticket.objects.create(
            id=ticket.id.value,
            event_id=ticket.event_id.value,
            user_id=ticket.user_id,
            user_email=ticket.user_email,
            purchase_date=ticket.purchase_date,
            price=ticket.price.amount,
            event_name=ticket.event_name,
            event_date=ticket.event_date,
            qr_code_url=ticket.qr_code_url,
        )

    def list_tickets(self) -> list[Ticket]:
        return [to_domain_ticket(row) for row in models.Ticket.objects.all()]

    def list_tickets_for_user(self, user_id: int) -> list[Ticket]:
        return [
            to_domain_ticket(row)
            for row in models.Ticket.objects.filter(user_id=user_id)
        ]
