"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to the exception handler in handlers/errors.py
- Never contain business logic
- Never expose internal error details
"""

from django.conf import settings
from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from ticketing.cache import EVENT_LIST_KEY, event_detail_key
from ticketing.domain import Purchaser
from ticketing.handlers.dependencies import build_event_service, build_ticket_service
from ticketing.handlers.permissions import IsStaffOrReadOnly
from ticketing.handlers.serializers import (
    AvailabilitySerializer,
    EventInputSerializer,
    EventSerializer,
    PurchaseRequestSerializer,
    TicketSerializer,
)
from ticketing.services import EventService, TicketService


class EventView(APIView):
    permission_classes = [IsStaffOrReadOnly]

    def get_service(self) -> EventService:
        return build_event_service()


class EventListView(EventView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        data = cache.get(EVENT_LIST_KEY)
        if data is None:
            events = self.get_service().list_events()
            data = EventSerializer(events, many=True).data
            cache.set(EVENT_LIST_KEY, data, settings.EVENT_CACHE_TIMEOUT)
        return Response(data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().create_event(**serializer.validated_data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(EventView):
    """Handler for GET/PUT/PATCH/DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        cache_key = event_detail_key(event_id)
        data = cache.get(cache_key) if cache_key else None
        if data is None:
            event, availability = self.get_service().get_event_with_availability(event_id)
            data = {
                **EventSerializer(event).data,
                **AvailabilitySerializer(availability).data,
            }
            cache.set(cache_key, data, settings.EVENT_CACHE_TIMEOUT)
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        event = self.get_service().update_event(event_id, serializer.validated_data)
        return Response(EventSerializer(event).data)

    patch = put

    def delete(self, request: Request, event_id: str) -> Response:
        self.get_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TicketView(APIView):
    permission_classes = [IsAuthenticated]

    def get_service(self) -> TicketService:
        return build_ticket_service()


class TicketListView(TicketView):
    """Handler for GET /api/tickets

    Staff users see every ticket, everyone else only their own.
    """

    def get(self, request: Request) -> Response:
        service = self.get_service()
        if request.user.is_staff:
            tickets = service.list_all_tickets()
        else:
            tickets = service.list_tickets_for_user(request.user.pk)
        return Response(TicketSerializer(tickets, many=True).data)


class TicketPurchaseView(TicketView):
    """Handler for POST /api/tickets/purchase"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        purchaser = Purchaser(id=request.user.pk, email=request.user.email)
        tickets = self.get_service().purchase(
            serializer.validated_data["eventId"],
            serializer.validated_data["quantity"],
            purchaser,
        )
        return Response(
            TicketSerializer(tickets, many=True).data,
            status=status.HTTP_201_CREATED,
        )
