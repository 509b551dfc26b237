"""
Stateless validation for ledger operations.

The is_* helpers return booleans; the validate_*/ensure_* helpers raise the
matching ledger error so services can call them inline.
"""

from django.conf import settings
from django.utils import timezone

from core.exceptions import (
    AlreadyVotedError,
    InvalidInputError,
    InvalidPollDurationError,
    InvalidTimestampError,
    PollEndedError,
    PollEndedInPastError,
    PollNotStartedError,
)
from core.utils.addressing import U64_MAX

# Field widths in UTF-8 bytes
MAX_DESCRIPTION_BYTES = 200
MAX_CANDIDATE_NAME_BYTES = 32
# Matches the width of django.contrib.auth User.username
MAX_IDENTITY_LENGTH = 150

# Upper bound for poll timestamps (2030-01-01T00:00:00Z)
MAX_TIMESTAMP = 1_893_456_000


def current_timestamp() -> int:
    """Current Unix time in whole seconds."""
    return int(timezone.now().timestamp())


def is_valid_unix_timestamp(timestamp) -> bool:
    """
    Sanity check for a poll timestamp.

    Not a real-time check: the upper bound is the fixed MAX_TIMESTAMP
    (the start of 2030).
    """
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        return False
    return 0 < timestamp < MAX_TIMESTAMP


def validate_poll_id(poll_id):
    if isinstance(poll_id, bool) or not isinstance(poll_id, int):
        raise InvalidInputError("poll_id must be an integer")
    if poll_id < 0 or poll_id > U64_MAX:
        raise InvalidInputError(f"poll_id {poll_id} is outside the unsigned 64-bit range")


def validate_text_width(value, field_name: str, max_bytes: int, allow_empty: bool = True):
    """
    Check a text field against its storage width in UTF-8 bytes.

    Raises:
        InvalidInputError: not a string, empty when required, or too wide
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"{field_name} must be a string")
    if not allow_empty and not value:
        raise InvalidInputError(f"{field_name} must not be empty")
    size = len(value.encode("utf-8"))
    if size > max_bytes:
        raise InvalidInputError(f"{field_name} is {size} bytes, the limit is {max_bytes}")


def validate_description(description):
    validate_text_width(description, "description", MAX_DESCRIPTION_BYTES)


def validate_candidate_name(candidate_name):
    validate_text_width(candidate_name, "candidate_name", MAX_CANDIDATE_NAME_BYTES, allow_empty=False)


def validate_identity(identity):
    if not isinstance(identity, str) or not identity:
        raise InvalidInputError("An authenticated identity is required")
    if len(identity) > MAX_IDENTITY_LENGTH:
        raise InvalidInputError(f"Identity is longer than {MAX_IDENTITY_LENGTH} characters")


def validate_poll_schedule(poll_start, poll_end):
    """
    Validate the nominal poll window.

    Raises:
        InvalidTimestampError: either timestamp is zero or beyond the bound
        InvalidPollDurationError: poll_start is not before poll_end
    """
    if not is_valid_unix_timestamp(poll_start) or not is_valid_unix_timestamp(poll_end):
        raise InvalidTimestampError()
    if poll_start >= poll_end:
        raise InvalidPollDurationError()


def is_window_enforced() -> bool:
    return getattr(settings, "LEDGER_ENFORCE_POLL_WINDOW", False)


def ensure_poll_not_ended(poll_end: int, now: int):
    """Reject a poll whose end time has already passed at creation."""
    if poll_end <= now:
        raise PollEndedInPastError()


def ensure_poll_open(poll, now: int):
    """
    Reject a vote outside [poll_start, poll_end].

    Raises:
        PollNotStartedError: now is before poll_start
        PollEndedError: now is after poll_end
    """
    if now < poll.poll_start:
        raise PollNotStartedError(f"Poll {poll.poll_id} opens at {poll.poll_start}")
    if now > poll.poll_end:
        raise PollEndedError(f"Poll {poll.poll_id} closed at {poll.poll_end}")


def ensure_not_voted(voter_record):
    if voter_record.voted:
        raise AlreadyVotedError(
            f"{voter_record.voter_identity} has already voted on this poll"
        )
