"""Ticket service - purchase admission and ticket issuance.

A purchase locks the event, counts the tickets already issued, and inserts
the new batch inside one unit of work. Two concurrent purchases for the same
event are serialized on the event lock, so their accepted quantities can never
add up to more than the event's capacity. Events are locked independently.
"""

import logging
import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from ticketing.domain import EventId, Purchaser, Quantity, Ticket, TicketId
from ticketing.domain.errors import (
    CapacityExceededError,
    EventNotFoundError,
    InvalidQuantityError,
)
from ticketing.stores.interfaces import TicketStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class TicketService:
    """Service for buying and listing tickets."""

    def __init__(
        self,
        store: TicketStore,
        qr_code_url: Callable[[TicketId], str],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._qr_code_url = qr_code_url
        self._clock = clock

    def purchase(self, event_id: str, quantity: int, purchaser: Purchaser) -> list[Ticket]:
        """Issue ``quantity`` tickets for an event, all or none.

        Raises:
            InvalidQuantityError: If quantity is not a positive integer.
            EventNotFoundError: If the event does not exist or the ID is malformed.
            CapacityExceededError: If the event cannot fit the whole batch.
            StorageFailureError: If persistence fails; nothing is issued.
        """
        try:
            requested = Quantity(quantity)
        except ValueError as exc:
            raise InvalidQuantityError(quantity) from exc

        try:
            parsed_id = EventId.from_string(event_id)
        except (TypeError, ValueError, AttributeError) as exc:
            raise EventNotFoundError(str(event_id)) from exc

        with self._store.atomic():
            event = self._store.get_event_for_update(parsed_id)
            if event is None:
                raise EventNotFoundError(event_id)

            sold = self._store.count_tickets_for_event(parsed_id)
            available = event.total_tickets.value - sold
            if requested.value > available:
                logger.info(
                    "Rejected purchase of %d tickets for event %s: %d available",
                    requested.value,
                    parsed_id,
                    max(available, 0),
                )
                raise CapacityExceededError(str(parsed_id), requested.value, max(available, 0))

            tickets = []
            for _ in range(requested.value):
                ticket_id = TicketId(uuid.uuid4())
                ticket = Ticket(
                    id=ticket_id,
                    event_id=event.id,
                    user_id=purchaser.id,
                    user_email=purchaser.email,
                    purchase_date=self._clock(),
                    price=event.ticket_price,
                    event_name=event.title,
                    event_date=event.date,
                    qr_code_url=self._qr_code_url(ticket_id),
                )
                self._store.insert_ticket(ticket)
                tickets.append(ticket)

        logger.info(
            "Issued %d tickets for event %s to user %s",
            len(tickets),
            parsed_id,
            purchaser.id,
        )
        return tickets

    def list_tickets_for_user(self, user_id: int) -> list[Ticket]:
        """Return the tickets bought by a user, newest first."""
        return self._store.list_tickets_for_user(user_id)

    def list_all_tickets(self) -> list[Ticket]:
        """Return every issued ticket, newest first."""
        return self._store.list_tickets()
