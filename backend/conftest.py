"""
Pytest configuration and fixtures for all tests.
This file makes fixtures available to all tests in backend/.
"""

import pytest
from django.contrib.auth.models import User

from apps.polls.services import initialize_candidate, initialize_poll


@pytest.fixture
def user(db):
    """Create a test user."""
    return User.objects.create_user(
        username="testuser",
        email="test@example.com",
        password="testpass123",
    )


@pytest.fixture
def other_user(db):
    """Create a second test user."""
    return User.objects.create_user(
        username="otheruser",
        email="other@example.com",
        password="testpass123",
    )


@pytest.fixture
def poll(db, user):
    """Create a test poll through the ledger operation."""
    return initialize_poll(
        identity=user.username,
        poll_id=1,
        description="Best fruit",
        poll_start=1_700_000_000,
        poll_end=1_800_000_000,
    )


@pytest.fixture
def candidates(db, poll, user):
    """Create two candidates for the test poll."""
    apple = initialize_candidate(identity=user.username, poll_id=poll.poll_id, candidate_name="Apple")
    banana = initialize_candidate(identity=user.username, poll_id=poll.poll_id, candidate_name="Banana")
    return [apple, banana]


@pytest.fixture
def api_client():
    """Create a DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def authenticated_client(api_client, user):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client
