from django import forms
from django.contrib import admin
from django.contrib.auth import get_user_model
from django.contrib.auth.admin import UserAdmin

from ticketing.domain import EventId
from ticketing.models import Event, Ticket
from ticketing.stores.django_store import DjangoEventStore


class EventAdminForm(forms.ModelForm):
    class Meta:
        model = Event
        fields = "__all__"

    def clean_total_tickets(self):
        total_tickets = self.cleaned_data["total_tickets"]
        if self.instance.pk is not None:
            # The admin change view runs in one transaction, so the event
            # stays locked until the form's changes are saved.
            store = DjangoEventStore()
            event_id = EventId(self.instance.pk)
            with store.atomic():
                store.get_event_for_update(event_id)
                sold = store.count_tickets_for_event(event_id)
            if total_tickets < sold:
                raise forms.ValidationError(
                    f"Total tickets cannot be lower than the {sold} already sold."
                )
        return total_tickets


class TicketCascadeMixin:
    """Lets an owner's deletion cascade to tickets that cannot be deleted alone."""

    def get_deleted_objects(self, objs, request):
        deleted, model_count, perms_needed, protected = super().get_deleted_objects(objs, request)
        perms_needed.discard(Ticket._meta.verbose_name)
        return deleted, model_count, perms_needed, protected


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0
    can_delete = False
    fields = ["id", "user", "user_email", "purchase_date", "price"]
    readonly_fields = fields

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Event)
class EventAdmin(TicketCascadeMixin, admin.ModelAdmin):
    form = EventAdminForm
    list_display = ["title", "date", "location", "total_tickets", "ticket_price"]
    search_fields = ["title", "location"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["id", "event_name", "user_email", "purchase_date", "price"]
    list_filter = ["event"]
    search_fields = ["user_email", "event_name"]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


User = get_user_model()

admin.site.unregister(User)


@admin.register(User)
class TicketOwnerAdmin(TicketCascadeMixin, UserAdmin):
    pass
