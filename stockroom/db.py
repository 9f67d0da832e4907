"""
Storage handle helpers.

- storage_errors(): converts driver failures into StorageError
- wait_for_database(): bounded-retry connection bootstrap
"""

import logging
import time
from contextlib import contextmanager

from django.db import DatabaseError, OperationalError, connections

from stockroom.conf import stockroom_settings
from stockroom.exceptions import StorageError

logger = logging.getLogger('stockroom')


def get_alias(using: str | None = None) -> str:
    """Database alias for inventory operations."""
    return using or stockroom_settings.DATABASE_ALIAS


@contextmanager
def storage_errors(operation: str, **context):
    """
    Re-raise any DatabaseError as StorageError.

    Wrap it around `transaction.atomic()` (not inside it) so commit
    failures are converted too. The original exception is logged and
    chained, but its text never reaches the StorageError message.
    """
    try:
        yield
    except DatabaseError as exc:
        logger.error(
            "inventory.storage_error",
            exc_info=True,
            extra={"operation": operation, **context},
        )
        raise StorageError(operation=operation) from exc


def wait_for_database(using: str | None = None, max_attempts: int | None = None,
                      delay: float | None = None):
    """
    Open a connection on `using`, retrying on OperationalError.

    Returns:
        The connected django connection wrapper

    Raises:
        StorageError('DATABASE_UNAVAILABLE'): After `max_attempts` failures
    """
    alias = get_alias(using)
    attempts = max_attempts or stockroom_settings.CONNECT_MAX_ATTEMPTS
    pause = stockroom_settings.CONNECT_RETRY_DELAY if delay is None else delay
    conn = connections[alias]

    for attempt in range(1, attempts + 1):
        try:
            conn.ensure_connection()
        except OperationalError:
            logger.warning(
                "stockroom.db.connect_retry",
                extra={"database": alias, "attempt": attempt, "max_attempts": attempts},
            )
            if attempt < attempts:
                time.sleep(pause)
            continue

        logger.info(
            "stockroom.db.connected",
            extra={"database": alias, "attempt": attempt},
        )
        return conn

    raise StorageError('DATABASE_UNAVAILABLE', database=alias, attempts=attempts)
