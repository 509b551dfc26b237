"""
Serializers for Polls app.

Input serializers only check types and ranges; field widths and timestamp
rules are enforced by the poll services so every caller gets the same errors.
"""

from rest_framework import serializers

from core.utils.addressing import U64_MAX

from .models import Candidate, Poll


class PollSerializer(serializers.ModelSerializer):
    """Serializer for Poll records."""

    class Meta:
        model = Poll
        fields = [
            "address",
            "poll_id",
            "description",
            "poll_start",
            "poll_end",
            "candidate_amount",
            "total_votes",
            "created_by",
            "created_at",
        ]
        read_only_fields = fields


class PollCreateSerializer(serializers.Serializer):
    """Serializer for creating a poll."""

    poll_id = serializers.IntegerField(min_value=0, max_value=U64_MAX, help_text="Unsigned 64-bit poll id")
    description = serializers.CharField(
        allow_blank=True, trim_whitespace=False, help_text="Poll description (at most 200 bytes)"
    )
    poll_start = serializers.IntegerField(min_value=0, help_text="Unix timestamp the poll opens")
    poll_end = serializers.IntegerField(min_value=0, help_text="Unix timestamp the poll closes")


class CandidateSerializer(serializers.ModelSerializer):
    """Serializer for Candidate records."""

    poll_id = serializers.IntegerField(source="poll.poll_id", read_only=True)
    poll_address = serializers.CharField(source="poll.address", read_only=True)

    class Meta:
        model = Candidate
        fields = ["address", "poll_id", "poll_address", "candidate_name", "candidate_votes", "created_at"]
        read_only_fields = fields


class CandidateCreateSerializer(serializers.Serializer):
    """Serializer for adding a candidate to a poll."""

    candidate_name = serializers.CharField(trim_whitespace=False, help_text="Candidate name (at most 32 bytes)")
