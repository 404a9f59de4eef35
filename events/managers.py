from django.db.models.query import QuerySet
from django.utils import timezone

from events.constants import EVENT_TYPES


class EventQuerySet(QuerySet):
    def of_type(self, event_type):
        return self.filter(event_type=event_type)

    def search(self, term):
        """Case-insensitive match on the event name. Blank terms match everything."""
        term = (term or "").strip()
        if not term:
            return self
        return self.filter(name__icontains=term)

    def created_by(self, user):
        return self.filter(created_by=user)

    def upcoming(self):
        return self.filter(event_date__gte=timezone.now())

    def past(self):
        return self.filter(event_date__lt=timezone.now())

    def event_types(self):
        """Distinct event type labels in use, sorted alphabetically."""
        return list(
            self.order_by("event_type")
            .values_list("event_type", flat=True)
            .distinct()
        )

    def type_options(self):
        """The standard event types followed by any custom types already stored."""
        extra = [label for label in self.event_types() if label not in EVENT_TYPES]
        return EVENT_TYPES + extra
