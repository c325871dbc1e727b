import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("date", models.DateTimeField()),
                ("location", models.CharField(blank=True, default="", max_length=255)),
                ("image_url", models.URLField(blank=True, max_length=500, null=True)),
                ("total_tickets", models.PositiveIntegerField()),
                ("ticket_price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-date"],
                "indexes": [models.Index(fields=["-date"], name="event_date_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(ticket_price__gte=0),
                        name="event_ticket_price_non_negative",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("user_email", models.EmailField(blank=True, default="", max_length=254)),
                ("purchase_date", models.DateTimeField()),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("event_name", models.CharField(max_length=255)),
                ("event_date", models.DateTimeField()),
                ("qr_code_url", models.URLField(max_length=500)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tickets",
                        to="ticketing.event",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tickets",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-purchase_date"],
                "indexes": [
                    models.Index(fields=["user", "-purchase_date"], name="ticket_user_purchase_idx")
                ],
            },
        ),
    ]
