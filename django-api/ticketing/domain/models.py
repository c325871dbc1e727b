"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in ticketing/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from ticketing.domain.value_objects import Capacity, EventId, Money, TicketId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    date: datetime
    location: str
    image_url: str | None
    total_tickets: Capacity
    ticket_price: Money
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EventDraft:
    """Fields of an event that has not been persisted yet."""

    title: str
    date: datetime
    total_tickets: Capacity
    ticket_price: Money
    description: str = ""
    location: str = ""
    image_url: str | None = None


@dataclass(frozen=True)
class Ticket:
    """Domain representation of an issued Ticket.

    Price, event name and event date are copied from the event when the
    ticket is issued and do not follow later edits of the event.
    """

    id: TicketId
    event_id: EventId
    user_id: int
    user_email: str
    purchase_date: datetime
    price: Money
    event_name: str
    event_date: datetime
    qr_code_url: str


@dataclass(frozen=True)
class Purchaser:
    """The authenticated caller buying tickets."""

    id: int
    email: str


@dataclass(frozen=True)
class Availability:
    """Sold and remaining tickets for an event."""

    event_id: EventId
    total_tickets: int
    sold: int

    @property
    def available(self) -> int:
        return max(self.total_tickets - self.sold, 0)
