"""
Poll and candidate records for LedgerPoll.

Both records are keyed by their derived address (see core.utils.addressing);
the address is the primary key so the database enforces one record per
address.
"""

from django.db import models
from django.db.models import Sum

from core.fields import UnsignedBigIntegerField


class Poll(models.Model):
    """A votable topic with its nominal window and running counters."""

    address = models.CharField(primary_key=True, max_length=64, editable=False, help_text="Derived from poll_id")
    poll_id = UnsignedBigIntegerField(db_index=True)
    description = models.CharField(max_length=200, blank=True)
    poll_start = models.PositiveBigIntegerField(help_text="Unix timestamp (seconds)")
    poll_end = models.PositiveBigIntegerField(help_text="Unix timestamp (seconds)")
    # Running counters, only changed by the ledger operations
    candidate_amount = models.PositiveBigIntegerField(default=0)
    total_votes = models.PositiveBigIntegerField(default=0)
    created_by = models.CharField(max_length=150, blank=True, help_text="Identity that created the poll")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["poll_id"]
        indexes = [
            models.Index(fields=["poll_start", "poll_end"], name="poll_window_idx"),
        ]

    def __str__(self):
        return f"Poll {self.poll_id}: {self.description}"

    def is_open_at(self, timestamp: int) -> bool:
        """Check if timestamp falls inside the nominal poll window."""
        return self.poll_start <= timestamp <= self.poll_end

    def candidate_votes_sum(self) -> int:
        """Sum of candidate_votes over this poll's candidates."""
        return self.candidates.aggregate(total=Sum("candidate_votes"))["total"] or 0


class Candidate(models.Model):
    """A choice inside exactly one poll, with its own vote counter."""

    address = models.CharField(
        primary_key=True, max_length=64, editable=False, help_text="Derived from poll_id and candidate_name"
    )
    poll = models.ForeignKey(Poll, on_delete=models.PROTECT, related_name="candidates")
    candidate_name = models.CharField(max_length=32)
    candidate_votes = models.PositiveBigIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at", "candidate_name"]
        constraints = [
            models.UniqueConstraint(fields=["poll", "candidate_name"], name="unique_poll_candidate_name"),
        ]

    def __str__(self):
        return f"{self.candidate_name} ({self.candidate_votes} votes)"
