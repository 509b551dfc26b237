"""
Management command to audit poll tallies.

For every poll, total_votes must equal the sum of its candidates' votes.
Exits with an error if any poll is inconsistent so it can run from cron or CI.
"""

from django.core.management.base import BaseCommand, CommandError

from apps.polls.models import Poll
from apps.polls.services import verify_poll_tally


class Command(BaseCommand):
    """Command to verify poll vote totals."""

    help = "Check that each poll's total_votes equals the sum of its candidates' votes"

    def add_arguments(self, parser):
        parser.add_argument("--poll-id", type=int, help="Only check this poll")

    def handle(self, *args, **options):
        """Execute the command."""
        polls = Poll.objects.all()
        if options.get("poll_id") is not None:
            polls = polls.filter(poll_id=options["poll_id"])

        checked = 0
        mismatches = []
        for poll in polls.iterator():
            checked += 1
            ok, candidate_sum = verify_poll_tally(poll)
            if not ok:
                mismatches.append(poll.poll_id)
                self.stderr.write(
                    f"Poll {poll.poll_id}: total_votes={poll.total_votes}, candidate votes sum={candidate_sum}"
                )

        if mismatches:
            raise CommandError(f"{len(mismatches)} of {checked} poll(s) have inconsistent tallies")

        self.stdout.write(self.style.SUCCESS(f"All {checked} poll(s) have consistent tallies"))
