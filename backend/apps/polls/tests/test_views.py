"""
Tests for Poll views.
"""

import pytest

from apps.polls.factories import UserFactory
from apps.polls.models import Poll
from core.utils.addressing import candidate_address, poll_address


@pytest.mark.django_db
class TestPollCreate:
    """Test POST /api/v1/polls/."""

    def test_create_poll(self, authenticated_client):
        response = authenticated_client.post(
            "/api/v1/polls/",
            {"poll_id": 1, "description": "Best fruit", "poll_start": 1000, "poll_end": 2000},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["poll_id"] == 1
        assert response.data["address"] == poll_address(1)
        assert response.data["created_by"] == "testuser"
        assert Poll.objects.filter(poll_id=1).exists()

    def test_create_poll_with_longest_username(self, api_client):
        long_user = UserFactory(username="p" * 150)
        api_client.force_authenticate(user=long_user)

        response = api_client.post(
            "/api/v1/polls/",
            {"poll_id": 5, "description": "Long name", "poll_start": 1000, "poll_end": 2000},
            format="json",
        )

        assert response.status_code == 201
        assert Poll.objects.get(poll_id=5).created_by == long_user.username

    def test_create_poll_requires_authentication(self, api_client):
        response = api_client.post(
            "/api/v1/polls/",
            {"poll_id": 1, "description": "x", "poll_start": 1000, "poll_end": 2000},
            format="json",
        )
        assert response.status_code in (401, 403)
        assert not Poll.objects.exists()

    def test_duplicate_poll_conflict(self, authenticated_client, poll):
        response = authenticated_client.post(
            "/api/v1/polls/",
            {"poll_id": poll.poll_id, "description": "Again", "poll_start": 1000, "poll_end": 2000},
            format="json",
        )

        assert response.status_code == 409
        data = response.json()
        assert data["error_code"] == "AlreadyExists"
        assert data["retryable"] is False

    def test_invalid_duration(self, authenticated_client):
        response = authenticated_client.post(
            "/api/v1/polls/",
            {"poll_id": 1, "description": "x", "poll_start": 2000, "poll_end": 1000},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "InvalidPollDuration"

    def test_invalid_timestamp(self, authenticated_client):
        response = authenticated_client.post(
            "/api/v1/polls/",
            {"poll_id": 1, "description": "x", "poll_start": 0, "poll_end": 1000},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "InvalidTimestamp"

    def test_description_too_long(self, authenticated_client):
        response = authenticated_client.post(
            "/api/v1/polls/",
            {"poll_id": 1, "description": "x" * 201, "poll_start": 1000, "poll_end": 2000},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "InvalidInput"

    def test_missing_fields(self, authenticated_client):
        response = authenticated_client.post("/api/v1/polls/", {"poll_id": 1}, format="json")
        assert response.status_code == 400
        data = response.json()
        assert data["error_code"] == "ValidationError"
        assert "poll_start" in data["errors"]

    def test_negative_poll_id(self, authenticated_client):
        response = authenticated_client.post(
            "/api/v1/polls/",
            {"poll_id": -1, "description": "x", "poll_start": 1000, "poll_end": 2000},
            format="json",
        )
        assert response.status_code == 400


@pytest.mark.django_db
class TestPollRead:
    """Test poll list and detail."""

    def test_list_polls(self, api_client, poll):
        response = api_client.get("/api/v1/polls/")
        assert response.status_code == 200
        assert response.data["count"] == 1
        assert response.data["results"][0]["poll_id"] == poll.poll_id

    def test_retrieve_poll(self, api_client, poll, candidates):
        response = api_client.get(f"/api/v1/polls/{poll.poll_id}/")
        assert response.status_code == 200
        assert response.data["description"] == "Best fruit"
        assert response.data["candidate_amount"] == 2

    def test_retrieve_missing_poll(self, api_client, db):
        response = api_client.get("/api/v1/polls/404/")
        assert response.status_code == 404
        assert response.json()["error_code"] == "NotFound"

    def test_results(self, api_client, poll, candidates):
        response = api_client.get(f"/api/v1/polls/{poll.poll_id}/results/")
        assert response.status_code == 200
        assert response.data["total_votes"] == 0
        assert len(response.data["candidates"]) == 2


@pytest.mark.django_db
class TestCandidateEndpoints:
    """Test candidate endpoints."""

    def test_add_candidate(self, authenticated_client, poll):
        response = authenticated_client.post(
            f"/api/v1/polls/{poll.poll_id}/candidates/", {"candidate_name": "Apple"}, format="json"
        )

        assert response.status_code == 201
        assert response.data["candidate_name"] == "Apple"
        assert response.data["candidate_votes"] == 0
        assert response.data["poll_id"] == poll.poll_id
        assert response.data["address"] == candidate_address(poll.poll_id, "Apple")

        poll.refresh_from_db()
        assert poll.candidate_amount == 1

    def test_add_candidate_requires_authentication(self, api_client, poll):
        response = api_client.post(
            f"/api/v1/polls/{poll.poll_id}/candidates/", {"candidate_name": "Apple"}, format="json"
        )
        assert response.status_code in (401, 403)

    def test_add_candidate_missing_poll(self, authenticated_client, db):
        response = authenticated_client.post("/api/v1/polls/77/candidates/", {"candidate_name": "Apple"}, format="json")
        assert response.status_code == 404

    def test_duplicate_candidate(self, authenticated_client, poll, candidates):
        response = authenticated_client.post(
            f"/api/v1/polls/{poll.poll_id}/candidates/", {"candidate_name": "Apple"}, format="json"
        )
        assert response.status_code == 409
        assert response.json()["error_code"] == "AlreadyExists"

    def test_candidate_name_too_long(self, authenticated_client, poll):
        response = authenticated_client.post(
            f"/api/v1/polls/{poll.poll_id}/candidates/", {"candidate_name": "x" * 33}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "InvalidInput"

    def test_list_candidates(self, api_client, poll, candidates):
        response = api_client.get(f"/api/v1/polls/{poll.poll_id}/candidates/")
        assert response.status_code == 200
        assert [c["candidate_name"] for c in response.data] == ["Apple", "Banana"]

    def test_candidate_detail(self, api_client, poll, candidates):
        response = api_client.get(f"/api/v1/polls/{poll.poll_id}/candidates/Banana/")
        assert response.status_code == 200
        assert response.data["candidate_name"] == "Banana"

    def test_candidate_detail_missing(self, api_client, poll):
        response = api_client.get(f"/api/v1/polls/{poll.poll_id}/candidates/Durian/")
        assert response.status_code == 404

    def test_candidate_detail_name_with_slash(self, authenticated_client, poll):
        created = authenticated_client.post(
            f"/api/v1/polls/{poll.poll_id}/candidates/", {"candidate_name": "Red/Green"}, format="json"
        )
        assert created.status_code == 201

        response = authenticated_client.get(f"/api/v1/polls/{poll.poll_id}/candidates/Red/Green/")
        assert response.status_code == 200
        assert response.data["candidate_name"] == "Red/Green"
        assert response.data["address"] == candidate_address(poll.poll_id, "Red/Green")
