"""
Django filters for narrowing down the event list.
"""

import django_filters
from django import forms
from django.db.models import QuerySet

from events.models import Event

ALL_EVENT_TYPES = "all"


class BooleanFilter(django_filters.BooleanFilter):
    field_class = forms.BooleanField


class EventFilterSet(django_filters.FilterSet):
    """FilterSet behind the event type select, the name search and "My Events"."""

    event_type = django_filters.CharFilter(
        label="Filter by event type",
        method="filter_event_type",
        widget=forms.Select(),
    )
    search = django_filters.CharFilter(
        label="Search Events",
        method="filter_search",
        widget=forms.TextInput(attrs={"placeholder": "Search by event name"}),
    )
    my_events = BooleanFilter(
        label="My Events",
        method="filter_my_events",
        widget=forms.CheckboxInput(),
    )

    class Meta:
        model = Event
        fields = []

    def __init__(self, *args, **kwargs):
        """Populate the event type choices from the stored events."""
        super().__init__(*args, **kwargs)
        self.form.fields["event_type"].widget.choices = [
            (ALL_EVENT_TYPES, "All")
        ] + [(label, label) for label in Event.objects.type_options()]

    def filter_event_type(
        self, queryset: QuerySet[Event], name: str, value: str
    ) -> QuerySet[Event]:
        if value == ALL_EVENT_TYPES:
            return queryset
        return queryset.of_type(value)

    def filter_search(
        self, queryset: QuerySet[Event], name: str, value: str
    ) -> QuerySet[Event]:
        return queryset.search(value)

    def filter_my_events(
        self, queryset: QuerySet[Event], name: str, value: bool
    ) -> QuerySet[Event]:
        if not value or self.request is None:
            return queryset
        return queryset.created_by(self.request.user)

    @property
    def has_active_filter(self) -> bool:
        """Whether a type filter or search term is narrowing the list."""
        data = self.form.cleaned_data if self.form.is_valid() else {}
        event_type = data.get("event_type")
        return bool(data.get("search")) or bool(
            event_type and event_type != ALL_EVENT_TYPES
        )
