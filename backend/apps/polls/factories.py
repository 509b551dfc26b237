"""
Factory Boy factories for Polls models.

Addresses are derived from the same seeds the services use, so factory
records sit exactly where the ledger operations would look for them.
"""

import factory
from django.contrib.auth.models import User

from core.utils.addressing import candidate_address, poll_address

from .models import Candidate, Poll


class UserFactory(factory.django.DjangoModelFactory):
    """Factory for User model."""

    class Meta:
        model = User
        django_get_or_create = ("username",)

    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    password = factory.django.Password("testpass123")


class PollFactory(factory.django.DjangoModelFactory):
    """Factory for Poll model."""

    class Meta:
        model = Poll

    poll_id = factory.Sequence(lambda n: n + 1000)
    address = factory.LazyAttribute(lambda obj: poll_address(obj.poll_id))
    description = factory.Faker("sentence", nb_words=4)
    poll_start = 1_700_000_000
    poll_end = 1_800_000_000
    candidate_amount = 0
    total_votes = 0
    created_by = factory.Faker("user_name")


class CandidateFactory(factory.django.DjangoModelFactory):
    """Factory for Candidate model."""

    class Meta:
        model = Candidate

    poll = factory.SubFactory(PollFactory)
    candidate_name = factory.Sequence(lambda n: f"Candidate {n}")
    address = factory.LazyAttribute(lambda obj: candidate_address(obj.poll.poll_id, obj.candidate_name))
    candidate_votes = 0
