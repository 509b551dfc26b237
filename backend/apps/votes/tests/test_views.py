"""
Tests for Vote views.
"""

from unittest.mock import patch

import pytest
from django.db import OperationalError
from freezegun import freeze_time

from apps.polls.factories import UserFactory
from apps.votes.models import VoterRecord
from core.utils.addressing import voter_record_address


@pytest.mark.django_db
class TestCastVoteEndpoint:
    """Test POST /api/v1/votes/cast/."""

    def test_cast_vote(self, authenticated_client, poll, candidates):
        response = authenticated_client.post(
            "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Apple"}, format="json"
        )

        assert response.status_code == 201
        assert response.data["candidate_name"] == "Apple"
        assert response.data["candidate_votes"] == 1
        assert response.data["total_votes"] == 1
        assert response.data["voter_record_address"] == voter_record_address("testuser", poll.poll_id)

    def test_cast_vote_requires_authentication(self, api_client, poll, candidates):
        response = api_client.post(
            "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Apple"}, format="json"
        )
        assert response.status_code in (401, 403)
        assert not VoterRecord.objects.exists()

    def test_duplicate_vote(self, authenticated_client, poll, candidates):
        payload = {"poll_id": poll.poll_id, "candidate_name": "Apple"}
        authenticated_client.post("/api/v1/votes/cast/", payload, format="json")
        response = authenticated_client.post("/api/v1/votes/cast/", payload, format="json")

        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "AlreadyVoted"
        assert data["retryable"] is False

    def test_poll_not_found(self, authenticated_client, db):
        response = authenticated_client.post(
            "/api/v1/votes/cast/", {"poll_id": 404, "candidate_name": "Apple"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["error_code"] == "NotFound"

    def test_candidate_not_found(self, authenticated_client, poll, candidates):
        response = authenticated_client.post(
            "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Durian"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["error_code"] == "NotFound"

    def test_poll_not_started(self, authenticated_client, poll, candidates, settings):
        settings.LEDGER_ENFORCE_POLL_WINDOW = True
        # Ten seconds before poll_start (1_700_000_000)
        with freeze_time("2023-11-14 22:13:10"):
            response = authenticated_client.post(
                "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Apple"}, format="json"
            )
        assert response.status_code == 403
        assert response.json()["error_code"] == "PollNotStarted"

    def test_poll_ended(self, authenticated_client, poll, candidates, settings):
        settings.LEDGER_ENFORCE_POLL_WINDOW = True
        # Ten seconds after poll_end (1_800_000_000)
        with freeze_time("2027-01-15 08:00:10"):
            response = authenticated_client.post(
                "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Apple"}, format="json"
            )
        assert response.status_code == 403
        assert response.json()["error_code"] == "PollEnded"

    def test_write_conflict_is_retryable(self, authenticated_client, poll, candidates):
        with patch("apps.votes.services.load_for_update", side_effect=OperationalError("deadlock detected")):
            response = authenticated_client.post(
                "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Apple"}, format="json"
            )
        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "WriteConflict"
        assert data["retryable"] is True

    def test_longest_username_can_vote(self, api_client, poll, candidates):
        long_user = UserFactory(username="u" * 150)
        api_client.force_authenticate(user=long_user)

        response = api_client.post(
            "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Apple"}, format="json"
        )

        assert response.status_code == 201
        record = VoterRecord.objects.get(address=voter_record_address(long_user.username, poll.poll_id))
        assert record.voter_identity == long_user.username
        assert record.voted is True

    def test_invalid_payload(self, authenticated_client, db):
        response = authenticated_client.post("/api/v1/votes/cast/", {"candidate_name": "Apple"}, format="json")
        assert response.status_code == 400
        assert "poll_id" in response.json()["errors"]


@pytest.mark.django_db
class TestVoteStatusEndpoints:
    """Test vote status and history endpoints."""

    def test_status_before_voting(self, authenticated_client, poll):
        response = authenticated_client.get(f"/api/v1/votes/status/?poll_id={poll.poll_id}")
        assert response.status_code == 200
        assert response.data == {"poll_id": poll.poll_id, "voted": False, "record": None}

    def test_status_after_voting(self, authenticated_client, poll, candidates):
        authenticated_client.post(
            "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Apple"}, format="json"
        )
        response = authenticated_client.get(f"/api/v1/votes/status/?poll_id={poll.poll_id}")
        assert response.status_code == 200
        assert response.data["voted"] is True
        assert response.data["record"]["poll_id"] == poll.poll_id

    def test_status_requires_poll_id(self, authenticated_client, db):
        response = authenticated_client.get("/api/v1/votes/status/")
        assert response.status_code == 400

    def test_my_votes(self, authenticated_client, poll, candidates):
        authenticated_client.post(
            "/api/v1/votes/cast/", {"poll_id": poll.poll_id, "candidate_name": "Banana"}, format="json"
        )
        response = authenticated_client.get("/api/v1/votes/my-votes/")
        assert response.status_code == 200
        assert len(response.data) == 1
        assert response.data[0]["voter_identity"] == "testuser"
        assert response.data[0]["poll_address"] == poll.address

    def test_my_votes_requires_authentication(self, api_client, db):
        response = api_client.get("/api/v1/votes/my-votes/")
        assert response.status_code in (401, 403)
