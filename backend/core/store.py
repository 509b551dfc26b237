"""
Transactional keyed store on top of the Django ORM.

Records are rows whose primary key is their derived address. Creation has two
explicit primitives:

- create_if_absent: the first creation at an address wins, any later one
  fails with AlreadyExistsError (polls, candidates).
- get_or_create_record: the first access creates, later accesses return the
  existing row (voter records).

Each ledger operation runs through ledger_operation, which wraps it in one
database transaction so all of its reads and writes commit together or not
at all.
"""

import functools
import logging

from django.conf import settings
from django.db import IntegrityError, OperationalError, transaction

from core.exceptions import AlreadyExistsError, NotFoundError, StoreConflictError

logger = logging.getLogger(__name__)


def ledger_operation(func):
    """
    Run a ledger operation as one atomic transaction.

    OperationalError (deadlock, lock timeout, locked database) is treated as
    a write conflict. When the operation owns the outermost transaction it is
    retried up to settings.LEDGER_CONFLICT_RETRIES times; inside a caller's
    transaction it is reported immediately since only the caller can retry.

    Raises:
        StoreConflictError: conflict persisted after the allowed retries
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        retries = getattr(settings, "LEDGER_CONFLICT_RETRIES", 0)
        attempt = 0
        while True:
            try:
                with transaction.atomic():
                    return func(*args, **kwargs)
            except OperationalError as e:
                nested = transaction.get_connection().in_atomic_block
                if nested or attempt >= retries:
                    logger.warning(f"{func.__name__}: write conflict after {attempt + 1} attempt(s): {e}")
                    raise StoreConflictError() from e
                attempt += 1
                logger.info(f"{func.__name__}: write conflict, retrying ({attempt}/{retries})")

    return wrapper


def create_if_absent(model, address: str, **fields):
    """
    Create a record at address, failing if the address is occupied.

    The insert runs in a savepoint so a duplicate leaves the surrounding
    transaction usable.

    Raises:
        AlreadyExistsError: a record already occupies the address
    """
    try:
        with transaction.atomic():
            return model.objects.create(address=address, **fields)
    except IntegrityError:
        raise AlreadyExistsError(
            f"{model._meta.verbose_name.capitalize()} already exists at address {address}"
        )


def get_or_create_record(model, address: str, **defaults):
    """
    Return the record at address, creating it with defaults on first access.

    The row is locked for the rest of the transaction. A concurrent first
    access of the same address blocks on the primary key and then sees the
    committed row.

    Returns:
        tuple: (record, created)
    """
    return model.objects.select_for_update().get_or_create(address=address, defaults=defaults)


def load_for_update(model, address: str, error_class=NotFoundError):
    """
    Load the record at address and lock it for the rest of the transaction.

    Raises:
        error_class: no record at the address (NotFoundError by default)
    """
    try:
        return model.objects.select_for_update().get(address=address)
    except model.DoesNotExist:
        raise error_class(f"No {model._meta.verbose_name} at address {address}")


def load(model, address: str, error_class=NotFoundError):
    """Load the record at address without locking it."""
    try:
        return model.objects.get(address=address)
    except model.DoesNotExist:
        raise error_class(f"No {model._meta.verbose_name} at address {address}")
