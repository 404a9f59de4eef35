from django.test import TestCase
from django.urls import reverse

from accounts.models import CustomUser
from events.factories import EventFactory


class EventAdminTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        cls.superuser = CustomUser.objects.create_superuser(
            email="admin@example.com", password="test"
        )
        cls.event = EventFactory.create(name="Cup Final", venue="Stadium")

    def setUp(self):
        self.client.force_login(self.superuser)

    def test_changelist_search_help_text(self):
        response = self.client.get(reverse("admin:events_event_changelist"))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Cup Final")
        self.assertContains(
            response,
            "Search by: Event&#x27;s Name, Event&#x27;s Venue, "
            "User&#x27;s Email Address",
        )

    def test_search(self):
        EventFactory.create(name="Night Run")
        response = self.client.get(
            reverse("admin:events_event_changelist"), {"q": "stadium"}
        )
        self.assertContains(response, "Cup Final")
        self.assertNotContains(response, "Night Run")

    def test_change_page(self):
        response = self.client.get(
            reverse("admin:events_event_change", args=[self.event.pk])
        )
        self.assertEqual(response.status_code, 200)
