"""
Poll services: poll and candidate creation, lookups and results.

Creation goes through the keyed store so that a poll id, or a candidate name
within a poll, can only ever be claimed once.
"""

import logging
from typing import Dict, List, Optional, Tuple

from django.conf import settings
from django.core.cache import cache
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from core.exceptions import CandidateNotFoundError, PollNotFoundError
from core.store import create_if_absent, ledger_operation, load, load_for_update
from core.utils.addressing import candidate_address, poll_address
from core.utils.poll_validation import (
    current_timestamp,
    ensure_poll_not_ended,
    is_window_enforced,
    validate_candidate_name,
    validate_description,
    validate_identity,
    validate_poll_id,
    validate_poll_schedule,
)

from .models import Candidate, Poll

logger = logging.getLogger(__name__)


@ledger_operation
def initialize_poll(
    identity: str,
    poll_id: int,
    description: str,
    poll_start: int,
    poll_end: int,
    now: Optional[int] = None,
) -> Poll:
    """
    Create a poll at the address derived from poll_id.

    Args:
        identity: The identity paying for the poll
        poll_id: Unsigned 64-bit poll id
        description: Poll description (at most 200 bytes)
        poll_start: Unix timestamp the poll opens
        poll_end: Unix timestamp the poll closes
        now: Current Unix time, only used when window enforcement is on

    Returns:
        Poll: The new poll with zeroed counters

    Raises:
        InvalidInputError: Malformed poll_id, description or identity
        InvalidTimestampError: A timestamp is zero or beyond the sanity bound
        InvalidPollDurationError: poll_start is not before poll_end
        PollEndedInPastError: poll_end already passed (window enforcement only)
        AlreadyExistsError: A poll with this id already exists
    """
    validate_identity(identity)
    validate_poll_id(poll_id)
    validate_description(description)
    validate_poll_schedule(poll_start, poll_end)
    if is_window_enforced():
        ensure_poll_not_ended(poll_end, current_timestamp() if now is None else now)

    poll = create_if_absent(
        Poll,
        poll_address(poll_id),
        poll_id=poll_id,
        description=description,
        poll_start=poll_start,
        poll_end=poll_end,
        candidate_amount=0,
        total_votes=0,
        created_by=identity,
    )
    logger.info(f"Poll created: poll_id={poll_id}, address={poll.address}, created_by={identity}")
    return poll


@ledger_operation
def initialize_candidate(identity: str, poll_id: int, candidate_name: str) -> Candidate:
    """
    Register a candidate under an existing poll.

    Returns:
        Candidate: The new candidate with zero votes

    Raises:
        InvalidInputError: Malformed poll_id, candidate_name or identity
        PollNotFoundError: No poll with this id
        AlreadyExistsError: The poll already has a candidate with this name
    """
    validate_identity(identity)
    validate_poll_id(poll_id)
    validate_candidate_name(candidate_name)

    poll = load_for_update(Poll, poll_address(poll_id), PollNotFoundError)
    candidate = create_if_absent(
        Candidate,
        candidate_address(poll_id, candidate_name),
        poll=poll,
        candidate_name=candidate_name,
        candidate_votes=0,
    )
    Poll.objects.filter(address=poll.address).update(candidate_amount=F("candidate_amount") + 1)
    transaction.on_commit(lambda: invalidate_results_cache(poll_id))

    logger.info(
        f"Candidate created: poll_id={poll_id}, candidate_name={candidate_name!r}, "
        f"address={candidate.address}, created_by={identity}"
    )
    return candidate


def get_poll(poll_id: int) -> Poll:
    """Load the poll with the given id."""
    validate_poll_id(poll_id)
    return load(Poll, poll_address(poll_id), PollNotFoundError)


def get_candidate(poll_id: int, candidate_name: str) -> Candidate:
    """Load a candidate of a poll by name."""
    validate_poll_id(poll_id)
    validate_candidate_name(candidate_name)
    return load(Candidate, candidate_address(poll_id, candidate_name), CandidateNotFoundError)


def verify_poll_tally(poll: Poll) -> Tuple[bool, int]:
    """
    Check that the poll total equals the sum of its candidates' votes.

    Returns:
        tuple: (is_consistent, candidate_votes_sum)
    """
    candidate_sum = poll.candidate_votes_sum()
    return poll.total_votes == candidate_sum, candidate_sum


def get_results_cache_key(poll_id: int) -> str:
    """Generate cache key for poll results."""
    return f"poll_results:{poll_id}"


def calculate_winners(candidates: List[Dict]) -> Tuple[List[Dict], bool]:
    """
    Pick the candidate(s) with the most votes.

    Args:
        candidates: List of {"candidate_name", "votes", ...} dictionaries

    Returns:
        tuple: (winners_list, is_tie)
    """
    if not candidates:
        return [], False

    max_votes = max(c["votes"] for c in candidates)
    if max_votes == 0:
        return [], False

    winners = [
        {"candidate_name": c["candidate_name"], "votes": c["votes"]}
        for c in candidates
        if c["votes"] == max_votes
    ]
    return winners, len(winners) > 1


def calculate_poll_results(poll_id: int, use_cache: bool = True) -> Dict:
    """
    Calculate poll results from the running counters.

    Args:
        poll_id: Poll ID
        use_cache: Whether to use cached results (default: True)

    Returns:
        dict: {
            "poll_id": int,
            "description": str,
            "total_votes": int,
            "candidate_amount": int,
            "candidates": [
                {"candidate_name": str, "votes": int, "percentage": float, "is_winner": bool}
            ],
            "winners": [{"candidate_name": str, "votes": int}],
            "is_tie": bool,
            "calculated_at": str
        }

    Raises:
        PollNotFoundError: No poll with this id
    """
    cache_key = get_results_cache_key(poll_id)

    if use_cache:
        cached_results = cache.get(cache_key)
        if cached_results:
            logger.debug(f"Returning cached results for poll {poll_id}")
            return cached_results

    poll = get_poll(poll_id)
    total_votes = poll.total_votes

    candidate_results = []
    for candidate in poll.candidates.order_by("created_at", "candidate_name").values(
        "candidate_name", "candidate_votes"
    ):
        votes = candidate["candidate_votes"]
        percentage = (float(votes) / total_votes * 100) if total_votes > 0 else 0.0
        candidate_results.append(
            {
                "candidate_name": candidate["candidate_name"],
                "votes": votes,
                "percentage": round(percentage, 2),
                "is_winner": False,
            }
        )

    winners, is_tie = calculate_winners(candidate_results)
    winner_names = {w["candidate_name"] for w in winners}
    for result in candidate_results:
        result["is_winner"] = result["candidate_name"] in winner_names

    results = {
        "poll_id": poll.poll_id,
        "description": poll.description,
        "total_votes": total_votes,
        "candidate_amount": poll.candidate_amount,
        "candidates": candidate_results,
        "winners": winners,
        "is_tie": is_tie,
        "calculated_at": timezone.now().isoformat(),
    }

    try:
        cache.set(cache_key, results, settings.RESULTS_CACHE_TTL)
        logger.debug(f"Cached results for poll {poll_id}")
    except Exception as e:
        logger.error(f"Error caching results for poll {poll_id}: {e}")

    return results


def invalidate_results_cache(poll_id: int):
    """
    Invalidate cached results for a poll.

    Args:
        poll_id: Poll ID
    """
    cache_key = get_results_cache_key(poll_id)
    try:
        cache.delete(cache_key)
        logger.debug(f"Invalidated results cache for poll {poll_id}")
    except Exception as e:
        logger.error(f"Error invalidating cache for poll {poll_id}: {e}")
