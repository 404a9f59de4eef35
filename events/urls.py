from django.urls import path

from events.views.events import (
    EventCreateView,
    EventDeleteView,
    EventDetailView,
    EventListView,
    EventUpdateView,
    event_calendar_download,
)

urlpatterns = [
    path("", EventListView.as_view(), name="home"),
    path("events/new/", EventCreateView.as_view(), name="event_create"),
    path("events/<uuid:pk>/", EventDetailView.as_view(), name="event_detail"),
    path("events/<uuid:pk>/edit/", EventUpdateView.as_view(), name="event_edit"),
    path("events/<uuid:pk>/delete/", EventDeleteView.as_view(), name="event_delete"),
    path(
        "events/<uuid:pk>/calendar.ics",
        event_calendar_download,
        name="event_calendar",
    ),
]
