from ticketing.domain.models import Availability, Event, EventDraft, Purchaser, Ticket
from ticketing.domain.value_objects import Capacity, EventId, Money, Quantity, TicketId

__all__ = [
    "Event",
    "EventDraft",
    "Ticket",
    "Purchaser",
    "Availability",
    "EventId",
    "TicketId",
    "Money",
    "Capacity",
    "Quantity",
]
