"""
Structural checks on request input, performed before any storage access.

- parse_identifier: path identifiers (review_id, comment_id) must be integers.
- validate_comment_payload: strict two-key shape for new comments.
- extract_vote_increment / ensure_vote_increment: presence of `inc_votes`.
"""

import re
from typing import Any

from game_reviews.exceptions.base import (
    StructuralInputError,
    TypeMismatchError,
    INVALID_COMMENT_MESSAGE,
    MISSING_VOTE_INCREMENT_MESSAGE,
)

COMMENT_KEYS = frozenset({"username", "body"})
VOTE_INCREMENT_KEY = "inc_votes"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Identifier columns are 4-byte integers.
ID_MIN = -(2 ** 31)
ID_MAX = 2 ** 31 - 1


def parse_identifier(value: Any, *, field: str = "id") -> int:
    """
    Parse a resource identifier into an int.

    Accepts ints and strings made only of an optional sign and digits ("7", "-1").
    Anything else ("abc", "1.5", "", True), or a number outside the id column's
    range, is a type mismatch, never a "not found".

    Raises:
        TypeMismatchError
    """
    if isinstance(value, bool):
        raise TypeMismatchError(fields=[field])

    if isinstance(value, int):
        parsed = value
    elif isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        parsed = int(value)
    else:
        raise TypeMismatchError(fields=[field])

    if not ID_MIN <= parsed <= ID_MAX:
        raise TypeMismatchError(fields=[field])
    return parsed


def validate_comment_payload(payload: Any) -> dict[str, str]:
    """
    Check a new-comment payload has exactly `username` and `body`, both non-empty strings.

    Extra keys are rejected, not dropped.

    Returns:
        dict with the two validated values.

    Raises:
        StructuralInputError
    """
    if not isinstance(payload, dict) or set(payload.keys()) != COMMENT_KEYS:
        received = sorted(payload.keys()) if isinstance(payload, dict) else None
        raise StructuralInputError(INVALID_COMMENT_MESSAGE, fields=received)

    for key in sorted(COMMENT_KEYS):
        value = payload[key]
        if not isinstance(value, str) or not value.strip():
            raise StructuralInputError(INVALID_COMMENT_MESSAGE, fields=[key])

    return {"username": payload["username"], "body": payload["body"]}


def ensure_vote_increment(inc_votes: Any) -> Any:
    """
    Reject a missing increment. 0 is a valid increment; the type of the value is
    left to the database (a fractional value fails there and is translated later).

    Booleans are the exception: drivers quietly store True as 1, so they are
    rejected here as a type mismatch.
    """
    if inc_votes is None:
        raise StructuralInputError(MISSING_VOTE_INCREMENT_MESSAGE, fields=[VOTE_INCREMENT_KEY])
    if isinstance(inc_votes, bool):
        raise TypeMismatchError(fields=[VOTE_INCREMENT_KEY])
    return inc_votes


def extract_vote_increment(payload: Any) -> Any:
    """Return `payload["inc_votes"]`, raising StructuralInputError when it is absent."""
    if not isinstance(payload, dict) or VOTE_INCREMENT_KEY not in payload:
        raise StructuralInputError(MISSING_VOTE_INCREMENT_MESSAGE, fields=[VOTE_INCREMENT_KEY])
    return ensure_vote_increment(payload[VOTE_INCREMENT_KEY])
