"""Serializers for validating requests and transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    title = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField()
    image = serializers.URLField(source="image_url", allow_null=True)
    totalTickets = serializers.IntegerField(source="total_tickets.value")
    ticketPrice = serializers.DecimalField(
        source="ticket_price.amount", max_digits=10, decimal_places=2, coerce_to_string=False
    )
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at")


class AvailabilitySerializer(serializers.Serializer):
    """Serializer for Availability domain model."""

    ticketsSold = serializers.IntegerField(source="sold")
    ticketsAvailable = serializers.IntegerField(source="available")


class EventInputSerializer(serializers.Serializer):
    """Validates the body of event create and update requests."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    date = serializers.DateTimeField()
    location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    image = serializers.URLField(
        source="image_url", max_length=500, required=False, allow_null=True, allow_blank=True
    )
    totalTickets = serializers.IntegerField(source="total_tickets", min_value=0)
    ticketPrice = serializers.DecimalField(
        source="ticket_price", max_digits=10, decimal_places=2, min_value=0
    )

    def validate_image(self, value: str | None) -> str | None:
        return value or None


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.UUIDField(source="id.value")
    eventId = serializers.UUIDField(source="event_id.value")
    userId = serializers.IntegerField(source="user_id")
    purchaseDate = serializers.DateTimeField(source="purchase_date")
    price = serializers.DecimalField(
        source="price.amount", max_digits=10, decimal_places=2, coerce_to_string=False
    )
    qrCodeUrl = serializers.CharField(source="qr_code_url")
    userEmail = serializers.CharField(source="user_email")
    eventName = serializers.CharField(source="event_name")
    eventDate = serializers.DateTimeField(source="event_date")


class PurchaseRequestSerializer(serializers.Serializer):
    """Validates the body of a ticket purchase request.

    Quantity bounds are a domain rule and are checked by the service.
    """

    eventId = serializers.CharField()
    quantity = serializers.IntegerField()
