"""
Deterministic address derivation for ledger records.

Every Poll, Candidate and VoterRecord lives under an address computed from
stable seed data. The same seeds always map to the same address, so a second
attempt to create a record with the same seeds lands on an occupied address
and is rejected by the store.
"""

import hashlib

from django.conf import settings

from core.exceptions import InvalidInputError

POLL_NAMESPACE = b"poll"
CANDIDATE_NAMESPACE = b"candidate"
VOTER_NAMESPACE = b"voter"

U64_MAX = 2**64 - 1

# Length of a derived address (hex SHA-256 digest)
ADDRESS_LENGTH = 64


def encode_seed(part) -> bytes:
    """
    Encode one seed part to bytes.

    Integers are unsigned 64-bit little-endian, text is UTF-8 and bytes are
    used as-is.

    Raises:
        InvalidInputError: integer outside the unsigned 64-bit range
        TypeError: unsupported seed type
    """
    # bool is an int subclass but is never a valid seed
    if isinstance(part, bool):
        raise TypeError("Boolean values cannot be used as address seeds")
    if isinstance(part, int):
        if part < 0 or part > U64_MAX:
            raise InvalidInputError(f"Seed {part} is outside the unsigned 64-bit range")
        return part.to_bytes(8, "little")
    if isinstance(part, str):
        return part.encode("utf-8")
    if isinstance(part, (bytes, bytearray)):
        return bytes(part)
    raise TypeError(f"Unsupported seed type: {type(part).__name__}")


def _frame(data: bytes) -> bytes:
    return len(data).to_bytes(4, "little") + data


def derive_address(namespace: bytes, *seed_parts, program_id=None) -> str:
    """
    Derive the storage address for a namespace and seed tuple.

    The digest covers the program prefix, the namespace and every seed part,
    each length-framed so that distinct tuples never share an encoding.

    Args:
        namespace: Record namespace (POLL_NAMESPACE, CANDIDATE_NAMESPACE, ...)
        *seed_parts: Seeds identifying the record (int, str or bytes)
        program_id: Key namespace prefix (defaults to settings.LEDGER_PROGRAM_ID)

    Returns:
        str: 64-character lowercase hex address
    """
    if program_id is None:
        program_id = settings.LEDGER_PROGRAM_ID

    digest = hashlib.sha256()
    digest.update(_frame(encode_seed(program_id)))
    digest.update(_frame(encode_seed(namespace)))
    for part in seed_parts:
        digest.update(_frame(encode_seed(part)))
    return digest.hexdigest()


def poll_address(poll_id: int) -> str:
    """Address of the Poll with the given id."""
    return derive_address(POLL_NAMESPACE, poll_id)


def candidate_address(poll_id: int, candidate_name: str) -> str:
    """Address of the Candidate named candidate_name in poll poll_id."""
    return derive_address(CANDIDATE_NAMESPACE, poll_id, candidate_name)


def voter_record_address(voter_identity: str, poll_id: int) -> str:
    """Address of the VoterRecord for voter_identity on poll poll_id."""
    return derive_address(VOTER_NAMESPACE, voter_identity, poll_id)
