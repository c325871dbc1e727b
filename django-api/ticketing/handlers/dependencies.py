"""Wiring of services to their Django-backed collaborators."""

from django.conf import settings

from ticketing.services import EventService, QrCodeUrlBuilder, TicketService
from ticketing.stores.django_store import DjangoEventStore, DjangoTicketStore


def build_event_service() -> EventService:
    return EventService(DjangoEventStore())


def build_ticket_service() -> TicketService:
    return TicketService(
        DjangoTicketStore(),
        QrCodeUrlBuilder(settings.TICKET_QR_URL_TEMPLATE),
    )
