"""
Classification of storage-engine errors.

Accessors never translate SQLAlchemy / driver exceptions themselves; they let them
propagate to the error pipeline, which asks this module "what kind of storage failure
is this?". Only two kinds matter to the HTTP contract:

| Kind             | Typical Postgres SQLSTATE        | Client sees              |
| ---------------- | -------------------------------- | ------------------------ |
| TYPE_MISMATCH    | 22P02, 22003, any class 22, 42804 | 400 type mismatch        |
| REFERENTIAL      | 23503                            | 404 "ID does not exist"  |
| UNKNOWN          | everything else                  | falls through to 500     |

Classification prefers the SQLSTATE exposed by the driver (asyncpg / psycopg set
`sqlstate` or `pgcode` on the wrapped exception) and falls back to message keywords
for engines that have no SQLSTATE (SQLite in the test suite).
"""

import logging
from enum import Enum

from sqlalchemy.exc import DataError, DBAPIError, StatementError

logger = logging.getLogger(__name__)


# https://www.postgresql.org/docs/current/errcodes-appendix.html
class PostgresErrorCodes(str, Enum):
    INVALID_TEXT_REPRESENTATION = "22P02"
    NUMERIC_VALUE_OUT_OF_RANGE = "22003"
    DATATYPE_MISMATCH = "42804"
    FOREIGN_KEY_VIOLATION = "23503"


# SQLSTATE class 22 is "data exception": every code in it means the value did not fit.
DATA_EXCEPTION_CLASS = "22"


class StorageErrorKind(Enum):
    TYPE_MISMATCH = "type_mismatch"
    REFERENTIAL = "referential"
    UNKNOWN = "unknown"


_TYPE_MISMATCH_KEYWORDS = (
    "invalid input syntax",
    "invalid input for query argument",
    "datatype mismatch",
    "out of range",
    "error binding parameter",
    # CHECK constraints named "<column>_is_integer" guard integer columns on SQLite.
    "_is_integer",
)
_REFERENTIAL_KEYWORDS = (
    "foreign key constraint",
    "foreign key",
    "is not present in table",
)


def _match_any(msg: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in msg for keyword in keywords)


def get_sqlstate(orig: object) -> str | None:
    """Return the SQLSTATE carried by a driver exception, if any."""
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def _classify_from_sqlstate(sqlstate: str) -> StorageErrorKind:
    if sqlstate == PostgresErrorCodes.FOREIGN_KEY_VIOLATION:
        return StorageErrorKind.REFERENTIAL

    if sqlstate.startswith(DATA_EXCEPTION_CLASS) or sqlstate == PostgresErrorCodes.DATATYPE_MISMATCH:
        return StorageErrorKind.TYPE_MISMATCH

    logger.debug("storage.classify.unmapped_sqlstate", extra={"sqlstate": sqlstate})
    return StorageErrorKind.UNKNOWN


def _classify_from_generic_message(msg: str) -> StorageErrorKind:
    """
    Classify based on message content (fallback for SQLite and driver-side errors).
    """
    normalized = msg.lower()

    if _match_any(normalized, _REFERENTIAL_KEYWORDS):
        return StorageErrorKind.REFERENTIAL

    if _match_any(normalized, _TYPE_MISMATCH_KEYWORDS):
        return StorageErrorKind.TYPE_MISMATCH

    # Keep the raw message at DEBUG only; it may contain row values.
    logger.debug("storage.classify.unknown_message", extra={"message_snippet": (msg or "")[:200]})
    return StorageErrorKind.UNKNOWN


def classify_storage_error(exc: BaseException) -> StorageErrorKind:
    """
    Classify an exception raised while talking to the database.

    Non-SQLAlchemy exceptions are always UNKNOWN, so application errors and
    programming errors never get mistaken for storage conditions.
    """
    if isinstance(exc, DBAPIError):
        orig = exc.orig

        sqlstate = get_sqlstate(orig)
        if sqlstate:
            return _classify_from_sqlstate(str(sqlstate))

        if isinstance(exc, DataError):
            return StorageErrorKind.TYPE_MISMATCH

        return _classify_from_generic_message(str(orig) if orig is not None else str(exc))

    # Bind-parameter processing failures (e.g. a driver refusing a str for an int
    # column) are wrapped in a plain StatementError around a TypeError/ValueError.
    if isinstance(exc, StatementError) and isinstance(exc.orig, (TypeError, ValueError)):
        return StorageErrorKind.TYPE_MISMATCH

    return StorageErrorKind.UNKNOWN
