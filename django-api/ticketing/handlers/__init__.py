from ticketing.handlers.views import (
    EventDetailView,
    EventListView,
    TicketListView,
    TicketPurchaseView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "TicketListView",
    "TicketPurchaseView",
]
