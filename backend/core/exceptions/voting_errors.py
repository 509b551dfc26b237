"""
Custom exceptions for ledger operations.
"""


class VotingError(Exception):
    """
    Base exception for poll, candidate and vote operations.

    All custom ledger exceptions inherit from this. ``error_code`` is the
    stable error kind reported to callers; ``retryable`` tells the caller
    whether repeating the same request can succeed.
    """

    default_status_code = 400
    default_message = "A voting error occurred"
    error_code = "VotingError"
    retryable = False

    def __init__(self, message=None, status_code=None):
        """
        Initialize exception.

        Args:
            message: Error message (defaults to default_message)
            status_code: HTTP status code (defaults to default_status_code)
        """
        self.message = message or self.default_message
        self.status_code = status_code or self.default_status_code
        super().__init__(self.message)


class InvalidInputError(VotingError):
    """Raised when an argument does not fit its field (too long, out of range)."""

    default_status_code = 400
    default_message = "Invalid input"
    error_code = "InvalidInput"


class InvalidTimestampError(VotingError):
    """Raised when a timestamp is zero or beyond the sanity bound."""

    default_status_code = 400
    default_message = "Invalid timestamp provided"
    error_code = "InvalidTimestamp"


class InvalidPollDurationError(VotingError):
    """Raised when poll_start is not strictly before poll_end."""

    default_status_code = 400
    default_message = "Poll start time must be before end time"
    error_code = "InvalidPollDuration"


class PollEndedInPastError(VotingError):
    """Raised when a poll is created with an end time that has already passed."""

    default_status_code = 400
    default_message = "Poll end time must be in the future"
    error_code = "PollEndedInPast"


class PollNotStartedError(VotingError):
    """Raised when voting before the poll window opens."""

    default_status_code = 403
    default_message = "The poll has not started yet"
    error_code = "PollNotStarted"


class PollEndedError(VotingError):
    """Raised when voting after the poll window closed."""

    default_status_code = 403
    default_message = "The poll has already ended"
    error_code = "PollEnded"


class AlreadyVotedError(VotingError):
    """Raised when an identity tries to vote twice on the same poll."""

    default_status_code = 409
    default_message = "This identity has already voted for this poll"
    error_code = "AlreadyVoted"


class AlreadyExistsError(VotingError):
    """Raised when a record already occupies the derived address."""

    default_status_code = 409
    default_message = "A record already exists at this address"
    error_code = "AlreadyExists"


class NotFoundError(VotingError):
    """Raised when no record occupies the derived address."""

    default_status_code = 404
    default_message = "Record not found"
    error_code = "NotFound"


class PollNotFoundError(NotFoundError):
    """Raised when a poll is not found."""

    default_message = "Poll not found"


class CandidateNotFoundError(NotFoundError):
    """Raised when a candidate is not found in the poll."""

    default_message = "Candidate not found"


class StoreConflictError(VotingError):
    """
    Raised when the store could not serialize a transaction against a
    concurrent one. Safe to retry with the same arguments.
    """

    default_status_code = 409
    default_message = "Conflicting concurrent write, please retry"
    error_code = "WriteConflict"
    retryable = True
