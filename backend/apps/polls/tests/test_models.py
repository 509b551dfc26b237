"""
Tests for Poll and Candidate models.
"""

import pytest
from django.db import IntegrityError, connection

from apps.polls.factories import CandidateFactory, PollFactory
from apps.polls.models import Candidate, Poll
from core.utils.addressing import U64_MAX, candidate_address, poll_address


@pytest.mark.unit
@pytest.mark.django_db
class TestPollModel:
    """Test Poll model."""

    def test_factory_uses_derived_address(self):
        poll = PollFactory(poll_id=12)
        assert poll.address == poll_address(12)

    def test_str(self):
        poll = PollFactory(poll_id=3, description="Lunch")
        assert str(poll) == "Poll 3: Lunch"

    def test_is_open_at(self):
        poll = PollFactory(poll_start=1000, poll_end=2000)
        assert poll.is_open_at(1000)
        assert poll.is_open_at(2000)
        assert not poll.is_open_at(999)
        assert not poll.is_open_at(2001)

    def test_candidate_votes_sum(self):
        poll = PollFactory()
        CandidateFactory(poll=poll, candidate_votes=2)
        CandidateFactory(poll=poll, candidate_votes=5)
        assert poll.candidate_votes_sum() == 7

    def test_candidate_votes_sum_empty(self):
        assert PollFactory().candidate_votes_sum() == 0

    @pytest.mark.parametrize("poll_id", [0, 2**63 - 1, 2**63, U64_MAX])
    def test_unsigned_poll_id_round_trip(self, poll_id):
        PollFactory(poll_id=poll_id)
        assert Poll.objects.get(address=poll_address(poll_id)).poll_id == poll_id
        assert Poll.objects.filter(poll_id=poll_id).count() == 1

    def test_high_poll_id_stored_as_signed(self):
        PollFactory(poll_id=U64_MAX)
        with connection.cursor() as cursor:
            cursor.execute("SELECT poll_id FROM polls_poll")
            assert cursor.fetchone()[0] == -1


@pytest.mark.unit
@pytest.mark.django_db
class TestCandidateModel:
    """Test Candidate model."""

    def test_factory_uses_derived_address(self):
        candidate = CandidateFactory(candidate_name="Apple")
        assert candidate.address == candidate_address(candidate.poll.poll_id, "Apple")

    def test_str(self):
        candidate = CandidateFactory(candidate_name="Apple", candidate_votes=4)
        assert str(candidate) == "Apple (4 votes)"

    def test_unique_name_per_poll(self):
        candidate = CandidateFactory(candidate_name="Apple")
        with pytest.raises(IntegrityError):
            Candidate.objects.create(address="0" * 64, poll=candidate.poll, candidate_name="Apple")
