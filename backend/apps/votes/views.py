"""
Views for Votes app.
"""

import logging

from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.throttles import VoteCastRateThrottle

from .serializers import (
    VoteCastSerializer,
    VoteReceiptSerializer,
    VoterRecordSerializer,
    VoteStatusQuerySerializer,
)
from .services import cast_vote, get_voter_record, list_recorded_votes

logger = logging.getLogger(__name__)


class VoteViewSet(viewsets.GenericViewSet):
    """
    ViewSet for casting votes and reading the caller's voter records.

    Endpoints:
    - POST /api/v1/votes/cast/ - Cast a vote
    - GET /api/v1/votes/status/?poll_id=1 - Voter record of the caller for a poll
    - GET /api/v1/votes/my-votes/ - Polls the caller has voted on
    """

    serializer_class = VoterRecordSerializer
    permission_classes = [IsAuthenticated]

    def get_throttles(self):
        """Return throttles based on action."""
        if self.action == "cast":
            return [VoteCastRateThrottle()]
        return []

    @action(detail=False, methods=["post"], url_path="cast")
    def cast(self, request):
        """
        Cast a vote on a poll as the authenticated identity.

        POST /api/v1/votes/cast/

        Request Body:
        {
            "poll_id": 1,
            "candidate_name": "Apple"
        }

        Returns:
        - 201 Created: Vote recorded
        - 400 Bad Request: Invalid request
        - 403 Forbidden: Outside the poll window (window enforcement only)
        - 404 Not Found: Poll or candidate not found
        - 409 Conflict: AlreadyVoted, or a retryable write conflict
        """
        serializer = VoteCastSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        receipt = cast_vote(
            voter_identity=request.user.get_username(),
            poll_id=serializer.validated_data["poll_id"],
            candidate_name=serializer.validated_data["candidate_name"],
        )
        return Response(VoteReceiptSerializer(receipt).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["get"], url_path="status")
    def vote_status(self, request):
        """
        Get the caller's voter record for a poll.

        GET /api/v1/votes/status/?poll_id=1

        Returns {"poll_id": ..., "voted": false, "record": null} when the
        caller has never voted on the poll.
        """
        query = VoteStatusQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        poll_id = query.validated_data["poll_id"]

        record = get_voter_record(request.user.get_username(), poll_id)
        return Response(
            {
                "poll_id": poll_id,
                "voted": bool(record and record.voted),
                "record": VoterRecordSerializer(record).data if record else None,
            }
        )

    @action(detail=False, methods=["get"], url_path="my-votes")
    def my_votes(self, request):
        """
        Get the caller's recorded votes.

        GET /api/v1/votes/my-votes/
        """
        records = list_recorded_votes(request.user.get_username())
        return Response(VoterRecordSerializer(records, many=True).data)
