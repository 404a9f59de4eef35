"""Event-related views."""

import logging
from typing import Any

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.db.models import QuerySet
from django.http import HttpRequest, HttpResponse
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.views.generic import (
    CreateView,
    DeleteView,
    DetailView,
    ListView,
    UpdateView,
)

from accounts.forms import ProfileForm
from accounts.models import UserProfile
from events.filters import EventFilterSet
from events.forms import EventForm
from events.icalendar_utils import (
    InvalidEventDateError,
    build_ics_from_event,
    calendar_filename,
)
from events.models import Event

logger = logging.getLogger(__name__)


class EventListView(LoginRequiredMixin, ListView):
    """
    The home page.

    Users without a first name on their profile are asked to complete it
    before any events are shown. Everyone else sees all events, narrowed
    by the type, search and "My Events" filters.
    """

    model = Event
    template_name = "events/event_list.html"
    context_object_name = "events"

    def get(self, request, *args, **kwargs):
        self.profile, _ = UserProfile.objects.get_or_create(user=request.user)
        return super().get(request, *args, **kwargs)

    def get_queryset(self) -> QuerySet[Event]:
        """Apply the filters from the query string to every stored event."""
        if not self.profile.has_name:
            return Event.objects.none()
        self.filterset = EventFilterSet(
            self.request.GET,
            queryset=Event.objects.select_related("created_by"),
            request=self.request,
        )
        return self.filterset.qs

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context["profile"] = self.profile
        if self.profile.has_name:
            context["filter"] = self.filterset
            context["my_events_active"] = bool(
                self.filterset.form.is_valid()
                and self.filterset.form.cleaned_data.get("my_events")
            )
        else:
            context["profile_form"] = ProfileForm(instance=self.profile)
        return context


class EventDetailView(LoginRequiredMixin, DetailView):
    model = Event
    template_name = "events/event_detail.html"
    context_object_name = "event"

    def get_queryset(self) -> QuerySet[Event]:
        return Event.objects.select_related("created_by")


class EventOwnerMixin(UserPassesTestMixin):
    """Only the user who created an event may change it."""

    def test_func(self) -> bool:
        return self.get_object().is_owned_by(self.request.user)


class EventCreateView(LoginRequiredMixin, CreateView):
    model = Event
    form_class = EventForm
    template_name = "events/event_form.html"
    success_url = reverse_lazy("home")

    def form_valid(self, form: EventForm) -> HttpResponse:
        form.instance.created_by = self.request.user
        response = super().form_valid(form)
        logger.info("Event %s created by user %s", self.object.pk, self.request.user.pk)
        messages.success(self.request, "Event created.")
        return response

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context["page_title"] = "Create Event"
        context["submit_text"] = "Create Event"
        return context


class EventUpdateView(LoginRequiredMixin, EventOwnerMixin, UpdateView):
    model = Event
    form_class = EventForm
    template_name = "events/event_form.html"
    success_url = reverse_lazy("home")

    def form_valid(self, form: EventForm) -> HttpResponse:
        response = super().form_valid(form)
        logger.info("Event %s updated by user %s", self.object.pk, self.request.user.pk)
        messages.success(self.request, "Event updated.")
        return response

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context["page_title"] = "Edit Event"
        context["submit_text"] = "Save Changes"
        return context


class EventDeleteView(LoginRequiredMixin, EventOwnerMixin, DeleteView):
    model = Event
    template_name = "events/event_confirm_delete.html"
    success_url = reverse_lazy("home")

    def form_valid(self, form) -> HttpResponse:
        event_id = self.object.pk
        response = super().form_valid(form)
        logger.info("Event %s deleted by user %s", event_id, self.request.user.pk)
        messages.success(self.request, "Event deleted.")
        return response


@login_required
def event_calendar_download(request: HttpRequest, pk) -> HttpResponse:
    """Offer an event as a downloadable .ics calendar invite."""
    event = get_object_or_404(Event, pk=pk)
    try:
        ics_content = build_ics_from_event(
            event,
            duration_minutes=settings.ICS_DURATION_MINUTES,
            event_url=event.get_full_url(),
        )
    except InvalidEventDateError:
        logger.warning("Could not build a calendar invite for event %s", event.pk)
        messages.error(
            request, "We couldn't generate the calendar invite. Please try again."
        )
        return redirect("home")

    response = HttpResponse(ics_content, content_type="text/calendar; charset=utf-8")
    response["Content-Disposition"] = (
        f'attachment; filename="{calendar_filename(event)}"'
    )
    return response
