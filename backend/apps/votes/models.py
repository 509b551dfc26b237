"""
Voter records for LedgerPoll.
"""

from django.db import models

from apps.polls.models import Poll


class VoterRecord(models.Model):
    """
    Durable marker preventing an identity from voting twice on a poll.

    Keyed by the address derived from (voter_identity, poll_id). Created on
    the identity's first cast for the poll; once voted is true it stays true.
    """

    address = models.CharField(
        primary_key=True, max_length=64, editable=False, help_text="Derived from voter_identity and poll_id"
    )
    voter_identity = models.CharField(max_length=150, db_index=True)
    voted = models.BooleanField(default=False)
    # Lookup aid only, set when the vote is recorded
    poll = models.ForeignKey(
        Poll,
        on_delete=models.PROTECT,
        related_name="voter_records",
        null=True,
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-updated_at"]
        indexes = [
            models.Index(fields=["voter_identity", "voted"], name="voter_identity_voted_idx"),
        ]

    def __str__(self):
        status = "voted" if self.voted else "not voted"
        return f"{self.voter_identity} ({status})"
