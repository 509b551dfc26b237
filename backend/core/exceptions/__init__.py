from .voting_errors import (  # noqa: F401
    AlreadyExistsError,
    AlreadyVotedError,
    CandidateNotFoundError,
    InvalidInputError,
    InvalidPollDurationError,
    InvalidTimestampError,
    NotFoundError,
    PollEndedError,
    PollEndedInPastError,
    PollNotFoundError,
    PollNotStartedError,
    StoreConflictError,
    VotingError,
)

__all__ = [
    "VotingError",
    "InvalidInputError",
    "InvalidTimestampError",
    "InvalidPollDurationError",
    "PollEndedInPastError",
    "PollNotStartedError",
    "PollEndedError",
    "AlreadyVotedError",
    "AlreadyExistsError",
    "NotFoundError",
    "PollNotFoundError",
    "CandidateNotFoundError",
    "StoreConflictError",
]
