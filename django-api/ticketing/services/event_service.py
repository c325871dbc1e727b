"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from ticketing.domain import Availability, Capacity, Event, EventDraft, EventId, Money
from ticketing.domain.errors import (
    CapacityBelowSoldError,
    EventNotFoundError,
    InvalidEventDataError,
    InvalidEventIdError,
)
from ticketing.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = frozenset(
    {
        "title",
        "description",
        "date",
        "location",
        "image_url",
        "total_tickets",
        "ticket_price",
    }
)


def _parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def _capacity(value: int) -> Capacity:
    try:
        return Capacity(value)
    except ValueError as exc:
        raise InvalidEventDataError(str(exc)) from exc


def _money(value: Decimal) -> Money:
    try:
        return Money(value)
    except ValueError as exc:
        raise InvalidEventDataError(str(exc)) from exc


class EventService:
    """Service for event catalog and capacity management."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(_parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_availability(self, event_id: str) -> Availability:
        """Return how many tickets of an event are sold and still available.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        _, availability = self.get_event_with_availability(event_id)
        return availability

    def get_event_with_availability(self, event_id: str) -> tuple[Event, Availability]:
        """Return an event together with its availability, loading it once.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self.get_event(event_id)
        sold = self._store.count_tickets_for_event(event.id)
        availability = Availability(
            event_id=event.id,
            total_tickets=event.total_tickets.value,
            sold=sold,
        )
        return event, availability

    def create_event(
        self,
        *,
        title: str,
        date: datetime,
        total_tickets: int,
        ticket_price: Decimal,
        description: str = "",
        location: str = "",
        image_url: str | None = None,
    ) -> Event:
        """Create an event.

        Raises:
            InvalidEventDataError: If capacity or price is negative.
        """
        draft = EventDraft(
            title=title,
            date=date,
            total_tickets=_capacity(total_tickets),
            ticket_price=_money(ticket_price),
            description=description,
            location=location,
            image_url=image_url,
        )
        event = self._store.create_event(draft)
        logger.info("Created event %s with %d tickets", event.id, event.total_tickets.value)
        return event

    def update_event(self, event_id: str, changes: Mapping[str, Any]) -> Event:
        """Apply a partial update to an event.

        Capacity changes are checked against the sold count under the same
        event lock purchases take, so a concurrent purchase cannot slip in
        between the check and the update.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidEventDataError: If a field is unknown or breaks a domain rule.
            CapacityBelowSoldError: If total_tickets would drop below tickets sold.
        """
        parsed_id = _parse_event_id(event_id)
        unknown = set(changes) - EDITABLE_FIELDS
        if unknown:
            raise InvalidEventDataError(f"Unknown fields: {', '.join(sorted(unknown))}")
        if "total_tickets" in changes:
            _capacity(changes["total_tickets"])
        if "ticket_price" in changes:
            _money(changes["ticket_price"])

        with self._store.atomic():
            event = self._store.get_event_for_update(parsed_id)
            if event is None:
                raise EventNotFoundError(event_id)

            if "total_tickets" in changes:
                sold = self._store.count_tickets_for_event(parsed_id)
                if changes["total_tickets"] < sold:
                    logger.warning(
                        "Rejected capacity change for event %s: %d requested, %d sold",
                        parsed_id,
                        changes["total_tickets"],
                        sold,
                    )
                    raise CapacityBelowSoldError(
                        str(parsed_id), changes["total_tickets"], sold
                    )

            return self._store.update_event(parsed_id, changes)

    def delete_event(self, event_id: str) -> None:
        """Delete an event together with its tickets.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        if not self._store.delete_event(_parse_event_id(event_id)):
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", event_id)
