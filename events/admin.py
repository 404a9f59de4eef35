from django.contrib import admin

from events.models import Event
from gameplan.admin import DescriptiveSearchMixin


@admin.register(Event)
class EventAdmin(DescriptiveSearchMixin, admin.ModelAdmin):
    model = Event
    list_display = ("name", "event_type", "event_date", "venue", "created_by")
    list_filter = ("event_type",)
    search_fields = ("name", "venue", "created_by__email")
    date_hierarchy = "event_date"
    ordering = ("event_date",)
    raw_id_fields = ("created_by",)
    readonly_fields = ("created_at", "updated_at")
