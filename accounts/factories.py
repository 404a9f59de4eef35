from __future__ import annotations

import factory
from django.db.models.signals import post_save

from accounts.models import CustomUser
from accounts.models import UserProfile


@factory.django.mute_signals(post_save)
class ProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = UserProfile

    user = factory.SubFactory("accounts.factories.UserFactory", profile=None)
    first_name = "Jane"
    last_name = "Doe"


@factory.django.mute_signals(post_save)
class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = CustomUser

    email = factory.Sequence(lambda n: "user_%d@example.com" % n)
    password = factory.django.Password("secretpassword123")
    profile = factory.RelatedFactory(ProfileFactory, factory_related_name="user")
