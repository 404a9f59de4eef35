from datetime import datetime
from datetime import timezone as dt_timezone

from django.test import TestCase
from freezegun import freeze_time

from accounts.factories import UserFactory
from events.constants import EVENT_TYPES
from events.factories import EventFactory
from events.models import Event


class EventModelTests(TestCase):
    def test_str(self):
        event = EventFactory.build(name="Cup Final")
        self.assertEqual(str(event), "Cup Final")

    def test_get_absolute_url(self):
        event = EventFactory.create()
        self.assertEqual(event.get_absolute_url(), f"/events/{event.pk}/")

    def test_get_full_url(self):
        event = EventFactory.create()
        self.assertEqual(
            event.get_full_url(), f"http://testserver/events/{event.pk}/"
        )

    def test_is_owned_by(self):
        event = EventFactory.create()
        self.assertTrue(event.is_owned_by(event.created_by))
        self.assertFalse(event.is_owned_by(UserFactory.create()))

    def test_ids_are_unique_uuids(self):
        first, second = EventFactory.create_batch(2)
        self.assertNotEqual(first.pk, second.pk)
        self.assertEqual(len(str(first.pk)), 36)


class EventQuerySetTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.user = UserFactory.create()
        cls.swim = EventFactory.create(
            name="Morning Swim",
            event_type="Swimming",
            event_date=datetime(2024, 5, 1, 7, 0, tzinfo=dt_timezone.utc),
            created_by=cls.user,
        )
        cls.match = EventFactory.create(
            name="Tennis Match",
            event_type="Tennis",
            event_date=datetime(2024, 7, 1, 16, 0, tzinfo=dt_timezone.utc),
        )
        cls.frisbee = EventFactory.create(
            name="Ultimate Frisbee League",
            event_type="Ultimate Frisbee",
            event_date=datetime(2024, 8, 1, 18, 0, tzinfo=dt_timezone.utc),
        )

    def test_default_ordering_is_by_date(self):
        self.assertEqual(
            list(Event.objects.all()), [self.swim, self.match, self.frisbee]
        )

    def test_of_type(self):
        self.assertEqual(list(Event.objects.of_type("Tennis")), [self.match])
        self.assertFalse(Event.objects.of_type("tennis").exists())

    def test_search(self):
        self.assertEqual(list(Event.objects.search("MATCH")), [self.match])
        self.assertEqual(list(Event.objects.search(" swim ")), [self.swim])

    def test_blank_search_matches_everything(self):
        for term in ("", "   ", None):
            with self.subTest(term=term):
                self.assertEqual(Event.objects.search(term).count(), 3)

    def test_created_by(self):
        self.assertEqual(list(Event.objects.created_by(self.user)), [self.swim])

    @freeze_time("2024-06-15 12:00:00")
    def test_upcoming_and_past(self):
        self.assertEqual(list(Event.objects.upcoming()), [self.match, self.frisbee])
        self.assertEqual(list(Event.objects.past()), [self.swim])

    def test_event_types(self):
        EventFactory.create(event_type="Tennis")
        self.assertEqual(
            Event.objects.event_types(), ["Swimming", "Tennis", "Ultimate Frisbee"]
        )

    def test_type_options(self):
        self.assertEqual(
            Event.objects.type_options(), EVENT_TYPES + ["Ultimate Frisbee"]
        )
        self.assertEqual(Event.objects.none().type_options(), EVENT_TYPES)
