"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every store can open a
unit of work: operations called inside ``atomic()`` commit together or not
at all, and ``get_event_for_update`` holds the event's lock until the unit
of work ends.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Any

from ticketing.domain import Event, EventDraft, EventId, Ticket


class UnitOfWork(ABC):
    """Interface for running store operations atomically."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Return a context manager wrapping one unit of work.

        Persistence failures inside the block roll the unit back and are
        raised as StorageFailureError.
        """
        ...


class EventStore(UnitOfWork):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by date descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_for_update(self, event_id: EventId) -> Event | None:
        """Return an event by ID and lock it for the current unit of work."""
        ...

    @abstractmethod
    def count_tickets_for_event(self, event_id: EventId) -> int:
        """Return the number of tickets issued for an event."""
        ...

    @abstractmethod
    def create_event(self, draft: EventDraft) -> Event:
        """Persist a new event and return it."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, changes: Mapping[str, Any]) -> Event:
        """Apply field changes to an existing event and return it."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event and its tickets. Return False if it did not exist."""
        ...


class TicketStore(UnitOfWork):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def get_event_for_update(self, event_id: EventId) -> Event | None:
        """Return an event by ID and lock it for the current unit of work."""
        ...

    @abstractmethod
    def count_tickets_for_event(self, event_id: EventId) -> int:
        """Return the number of tickets issued for an event."""
        ...

    @abstractmethod
    def insert_ticket(self, ticket: Ticket) -> None:
        """Persist a newly issued ticket."""
        ...

    @abstractmethod
    def list_tickets(self) -> list[Ticket]:
        """Return all tickets ordered by purchase_date descending."""
        ...

    @abstractmethod
    def list_tickets_for_user(self, user_id: int) -> list[Ticket]:
        """Return a user's tickets ordered by purchase_date descending."""
        ...
