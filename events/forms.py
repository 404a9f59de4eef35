from datetime import timedelta
from datetime import timezone as dt_timezone

from django import forms
from django.conf import settings

from events.constants import DATETIME_INPUT_FORMATS
from events.constants import DESCRIPTION_MAX_LENGTH
from events.constants import EVENT_NAME_MAX_LENGTH
from events.constants import EVENT_NAME_MIN_LENGTH
from events.constants import VENUE_MAX_LENGTH
from events.constants import VENUE_MIN_LENGTH
from events.models import Event


class EventForm(forms.ModelForm):
    """
    Create or edit an event.

    Every text field is trimmed before it is validated, and a blank
    description is stored as NULL rather than an empty string.
    """

    name = forms.CharField(
        label="Event Name",
        min_length=EVENT_NAME_MIN_LENGTH,
        max_length=EVENT_NAME_MAX_LENGTH,
        error_messages={
            "required": "Event name is required",
            "min_length": "Event name must be at least 3 characters",
            "max_length": "Event name must be 100 characters or fewer",
        },
    )
    event_type = forms.ChoiceField(
        label="Event Type",
        error_messages={
            "required": "Please select an event type",
            "invalid_choice": "Please select an event type",
        },
    )
    event_date = forms.DateTimeField(
        label="Date & Time",
        input_formats=DATETIME_INPUT_FORMATS,
        widget=forms.DateTimeInput(
            attrs={"type": "datetime-local"}, format="%Y-%m-%dT%H:%M"
        ),
        error_messages={
            "required": "Please select a valid date and time",
            "invalid": "Please select a valid date and time",
        },
    )
    venue = forms.CharField(
        label="Location",
        min_length=VENUE_MIN_LENGTH,
        max_length=VENUE_MAX_LENGTH,
        error_messages={
            "required": "Location is required",
            "min_length": "Location must be at least 2 characters",
            "max_length": "Location must be 200 characters or fewer",
        },
    )
    description = forms.CharField(
        label="Description",
        required=False,
        max_length=DESCRIPTION_MAX_LENGTH,
        widget=forms.Textarea(attrs={"rows": 4}),
        error_messages={
            "max_length": "Description must be 500 characters or fewer",
        },
    )

    class Meta:
        model = Event
        fields = ("name", "event_type", "event_date", "venue", "description")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        options = Event.objects.type_options()
        current = self.instance.event_type
        if current and current not in options:
            options.append(current)
        self.fields["event_type"].choices = [("", "Select an event type")] + [
            (label, label) for label in options
        ]

    def clean_event_date(self):
        event_date = self.cleaned_data["event_date"]
        try:
            # The calendar invite needs the end time and both in UTC.
            end = event_date + timedelta(minutes=settings.ICS_DURATION_MINUTES)
            event_date.astimezone(dt_timezone.utc)
            end.astimezone(dt_timezone.utc)
        except OverflowError:
            raise forms.ValidationError(
                self.fields["event_date"].error_messages["invalid"], code="invalid"
            )
        return event_date

    def clean_description(self):
        return self.cleaned_data["description"] or None
