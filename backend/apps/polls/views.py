"""
Views for Polls app.
"""

import logging

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from core.throttles import CandidateCreateRateThrottle, PollCreateRateThrottle, SwitchableAnonRateThrottle

from .models import Poll
from .serializers import CandidateCreateSerializer, CandidateSerializer, PollCreateSerializer, PollSerializer
from .services import (
    calculate_poll_results,
    get_candidate,
    get_poll,
    initialize_candidate,
    initialize_poll,
)

logger = logging.getLogger(__name__)


class PollViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for polls and their candidates.

    Polls are addressed by their numeric poll_id.

    Endpoints:
    - POST /api/v1/polls/ - Create poll
    - GET /api/v1/polls/ - List polls (paginated)
    - GET /api/v1/polls/{poll_id}/ - Get poll detail
    - GET /api/v1/polls/{poll_id}/results/ - Get poll results
    - GET /api/v1/polls/{poll_id}/candidates/ - List candidates
    - POST /api/v1/polls/{poll_id}/candidates/ - Add a candidate
    - GET /api/v1/polls/{poll_id}/candidates/{candidate_name}/ - Get candidate detail
    """

    queryset = Poll.objects.all()
    serializer_class = PollSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_field = "poll_id"
    lookup_value_regex = r"\d+"

    def get_throttles(self):
        """Return throttles based on action."""
        if self.action == "create":
            return [PollCreateRateThrottle()]
        if self.action == "candidates" and self.request.method == "POST":
            return [CandidateCreateRateThrottle()]
        return [SwitchableAnonRateThrottle()]

    def get_object(self):
        """Resolve the poll through its derived address."""
        poll = get_poll(int(self.kwargs[self.lookup_field]))
        self.check_object_permissions(self.request, poll)
        return poll

    def retrieve(self, request, poll_id=None):
        return Response(PollSerializer(self.get_object()).data)

    def create(self, request):
        """
        Create a poll.

        POST /api/v1/polls/

        Request Body:
        {
            "poll_id": 1,
            "description": "Best fruit",
            "poll_start": 1000,
            "poll_end": 2000
        }

        Returns:
        - 201 Created: Poll created
        - 400 Bad Request: InvalidInput, InvalidTimestamp, InvalidPollDuration
        - 409 Conflict: AlreadyExists
        """
        serializer = PollCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        poll = initialize_poll(identity=request.user.get_username(), **serializer.validated_data)
        return Response(PollSerializer(poll).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["get", "post"], url_path="candidates")
    def candidates(self, request, poll_id=None):
        """
        List or add candidates of a poll.

        POST /api/v1/polls/{poll_id}/candidates/

        Request Body:
        {
            "candidate_name": "Apple"
        }

        Returns:
        - 200 OK: Candidate list (GET)
        - 201 Created: Candidate added (POST)
        - 404 Not Found: Poll not found
        - 409 Conflict: Candidate name already taken in this poll
        """
        if request.method == "POST":
            serializer = CandidateCreateSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            candidate = initialize_candidate(
                identity=request.user.get_username(),
                poll_id=int(poll_id),
                candidate_name=serializer.validated_data["candidate_name"],
            )
            return Response(CandidateSerializer(candidate).data, status=status.HTTP_201_CREATED)

        poll = self.get_object()
        candidates = poll.candidates.select_related("poll")
        return Response(CandidateSerializer(candidates, many=True).data)

    @action(detail=True, methods=["get"], url_path=r"candidates/(?P<candidate_name>.+)")
    def candidate_detail(self, request, poll_id=None, candidate_name=None):
        candidate = get_candidate(int(poll_id), candidate_name)
        return Response(CandidateSerializer(candidate).data)

    @action(detail=True, methods=["get"])
    def results(self, request, poll_id=None):
        """
        Get poll results computed from the running counters.

        GET /api/v1/polls/{poll_id}/results/
        """
        return Response(calculate_poll_results(int(poll_id)))
