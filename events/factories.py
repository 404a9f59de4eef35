from datetime import datetime
from datetime import timezone as dt_timezone

import factory

from accounts.factories import UserFactory
from events.models import Event


class EventFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Event

    name = factory.Sequence(lambda n: "Event %d" % n)
    event_type = "Running"
    event_date = datetime(2024, 6, 1, 10, 0, tzinfo=dt_timezone.utc)
    description = "Bring water"
    venue = "City Park"
    created_by = factory.SubFactory(UserFactory)
