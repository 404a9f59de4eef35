import uuid

from django.conf import settings
from django.db import models
from django.urls import reverse

from events.constants import DESCRIPTION_MAX_LENGTH
from events.constants import EVENT_NAME_MAX_LENGTH
from events.constants import EVENT_TYPE_MAX_LENGTH
from events.constants import VENUE_MAX_LENGTH
from events.managers import EventQuerySet


class Event(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=EVENT_NAME_MAX_LENGTH)
    event_type = models.CharField(max_length=EVENT_TYPE_MAX_LENGTH)
    event_date = models.DateTimeField()
    description = models.TextField(
        max_length=DESCRIPTION_MAX_LENGTH, blank=True, null=True
    )
    venue = models.CharField(max_length=VENUE_MAX_LENGTH)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="events",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = EventQuerySet.as_manager()

    class Meta:
        ordering = ("event_date",)
        indexes = [
            models.Index(
                fields=["event_type", "event_date"], name="event_type_date_idx"
            ),
        ]

    def __str__(self):
        return self.name

    def is_owned_by(self, user):
        return user.is_authenticated and self.created_by_id == user.pk

    def get_absolute_url(self):
        return reverse("event_detail", kwargs={"pk": self.pk})

    def get_full_url(self):
        return settings.BASE_URL + self.get_absolute_url()
