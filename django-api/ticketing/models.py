"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    date = models.DateTimeField()
    location = models.CharField(max_length=255, blank=True, default="")
    image_url = models.URLField(max_length=500, blank=True, null=True)
    total_tickets = models.PositiveIntegerField()
    ticket_price = models.DecimalField(max_digits=10, decimal_places=2)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-date"]
        indexes = [
            models.Index(fields=["-date"], name="event_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(ticket_price__gte=0),
                name="event_ticket_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return self.title


class Ticket(models.Model):
    """Persistence model for issued tickets.

    Rows are written once by the purchase flow and removed only by cascade.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="tickets"
    )
    user_email = models.EmailField(blank=True, default="")
    purchase_date = models.DateTimeField()
    price = models.DecimalField(max_digits=10, decimal_places=2)
    event_name = models.CharField(max_length=255)
    event_date = models.DateTimeField()
    qr_code_url = models.URLField(max_length=500)

    class Meta:
        ordering = ["-purchase_date"]
        indexes = [
            models.Index(fields=["user", "-purchase_date"], name="ticket_user_purchase_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.event_name} - {self.id}"
