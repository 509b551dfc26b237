"""
Vote services: one vote per identity per poll.

cast_vote runs as a single ledger operation. The poll row is locked first,
which serializes every vote on that poll, and the voter record is keyed by
the address derived from (identity, poll_id), so the voted flag can only be
flipped once per identity and poll.
"""

import logging
from typing import Dict, List, Optional

from django.db import transaction
from django.db.models import F

from apps.polls.models import Candidate, Poll
from apps.polls.services import invalidate_results_cache
from core.exceptions import CandidateNotFoundError, PollNotFoundError
from core.store import get_or_create_record, ledger_operation, load_for_update
from core.utils.addressing import candidate_address, poll_address, voter_record_address
from core.utils.poll_validation import (
    current_timestamp,
    ensure_not_voted,
    ensure_poll_open,
    is_window_enforced,
    validate_candidate_name,
    validate_identity,
    validate_poll_id,
)

from .models import VoterRecord

logger = logging.getLogger(__name__)


@ledger_operation
def cast_vote(
    voter_identity: str,
    poll_id: int,
    candidate_name: str,
    now: Optional[int] = None,
) -> Dict:
    """
    Record one vote from voter_identity for a candidate of a poll.

    Steps:
    - Lock the poll and the candidate (both must exist)
    - Get or create the voter record for (voter_identity, poll_id)
    - Reject the vote if the record is already marked as voted
    - Check the poll window when window enforcement is on
    - Increment the candidate and poll counters by one each
    - Mark the voter record as voted and point it at the poll

    Args:
        voter_identity: The authenticated identity casting the vote
        poll_id: The poll being voted on
        candidate_name: Name of the chosen candidate
        now: Current Unix time, only used when window enforcement is on

    Returns:
        dict: Observational record of the vote:
            {"poll_id", "candidate_name", "candidate_votes", "total_votes",
             "poll_address", "voter_record_address"}

    Raises:
        InvalidInputError: Malformed identity, poll_id or candidate_name
        PollNotFoundError: No poll with this id
        CandidateNotFoundError: The poll has no candidate with this name
        AlreadyVotedError: This identity already voted on this poll
        PollNotStartedError: Before poll_start (window enforcement only)
        PollEndedError: After poll_end (window enforcement only)
    """
    validate_identity(voter_identity)
    validate_poll_id(poll_id)
    validate_candidate_name(candidate_name)

    poll = load_for_update(Poll, poll_address(poll_id), PollNotFoundError)
    candidate = load_for_update(Candidate, candidate_address(poll_id, candidate_name), CandidateNotFoundError)
    voter_record, created = get_or_create_record(
        VoterRecord,
        voter_record_address(voter_identity, poll_id),
        voter_identity=voter_identity,
        voted=False,
    )
    if created:
        logger.debug(f"Voter record created: address={voter_record.address}, poll_id={poll_id}")

    ensure_not_voted(voter_record)

    if is_window_enforced():
        ensure_poll_open(poll, current_timestamp() if now is None else now)

    Candidate.objects.filter(address=candidate.address).update(candidate_votes=F("candidate_votes") + 1)
    Poll.objects.filter(address=poll.address).update(total_votes=F("total_votes") + 1)

    voter_record.voted = True
    voter_record.poll = poll
    voter_record.save(update_fields=["voted", "poll", "updated_at"])

    candidate.refresh_from_db(fields=["candidate_votes"])
    poll.refresh_from_db(fields=["total_votes"])

    transaction.on_commit(lambda: invalidate_results_cache(poll_id))

    logger.info(f"Voted for candidate: {candidate.candidate_name}")
    logger.info(f"Candidate votes: {candidate.candidate_votes}")
    logger.info(f"Total votes in poll {poll_id}: {poll.total_votes}")

    return {
        "poll_id": poll_id,
        "candidate_name": candidate.candidate_name,
        "candidate_votes": candidate.candidate_votes,
        "total_votes": poll.total_votes,
        "poll_address": poll.address,
        "voter_record_address": voter_record.address,
    }


def get_voter_record(voter_identity: str, poll_id: int) -> Optional[VoterRecord]:
    """
    Look up the voter record for an identity on a poll.

    Returns:
        VoterRecord or None if the identity never voted on the poll
    """
    validate_identity(voter_identity)
    validate_poll_id(poll_id)
    return VoterRecord.objects.filter(address=voter_record_address(voter_identity, poll_id)).first()


def list_recorded_votes(voter_identity: str) -> List[VoterRecord]:
    """All polls this identity has voted on."""
    validate_identity(voter_identity)
    return list(
        VoterRecord.objects.filter(voter_identity=voter_identity, voted=True).select_related("poll")
    )
