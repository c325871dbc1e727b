from django.urls import path

from ticketing.handlers import (
    EventDetailView,
    EventListView,
    TicketListView,
    TicketPurchaseView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("tickets", TicketListView.as_view(), name="ticket-list"),
    path("tickets/purchase", TicketPurchaseView.as_view(), name="ticket-purchase"),
]
