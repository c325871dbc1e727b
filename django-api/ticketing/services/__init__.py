from ticketing.services.event_service import EventService
from ticketing.services.ticket_service import TicketService
from ticketing.services.verification import QrCodeUrlBuilder

__all__ = ["EventService", "TicketService", "QrCodeUrlBuilder"]
