"""
Serializers for Votes app.
"""

from rest_framework import serializers

from core.utils.addressing import U64_MAX

from .models import VoterRecord


class VoterRecordSerializer(serializers.ModelSerializer):
    """Serializer for VoterRecord with the referenced poll id."""

    poll_id = serializers.IntegerField(source="poll.poll_id", read_only=True, allow_null=True)
    poll_address = serializers.CharField(source="poll.address", read_only=True, allow_null=True)

    class Meta:
        model = VoterRecord
        fields = ["address", "voter_identity", "voted", "poll_id", "poll_address", "created_at", "updated_at"]
        read_only_fields = fields


class VoteCastSerializer(serializers.Serializer):
    """Serializer for casting a vote."""

    poll_id = serializers.IntegerField(min_value=0, max_value=U64_MAX, help_text="ID of the poll to vote on")
    candidate_name = serializers.CharField(trim_whitespace=False, help_text="Name of the candidate to vote for")


class VoteReceiptSerializer(serializers.Serializer):
    """Observational record returned after a successful vote."""

    poll_id = serializers.IntegerField()
    candidate_name = serializers.CharField()
    candidate_votes = serializers.IntegerField()
    total_votes = serializers.IntegerField()
    poll_address = serializers.CharField()
    voter_record_address = serializers.CharField()


class VoteStatusQuerySerializer(serializers.Serializer):
    poll_id = serializers.IntegerField(min_value=0, max_value=U64_MAX)
