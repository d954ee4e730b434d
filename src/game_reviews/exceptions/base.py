"""
Application-level exceptions raised by the core (validators, existence checks,
query builder, accessors).

Every exception carries the HTTP status and the fixed, client-safe message that the
error pipeline (see pipeline.py) passes through verbatim. Storage-engine errors are
NOT represented here: they propagate as SQLAlchemy exceptions and are classified in
storage_classifier.py.
"""

from typing import Iterable

# Fixed client-facing messages. Tests and clients rely on these exact strings.
TYPE_MISMATCH_MESSAGE = (
    "Type of the provided value does not match the type expected in the related database field"
)
REFERENTIAL_VIOLATION_MESSAGE = "ID does not exist"
RESOURCE_NOT_FOUND_MESSAGE = "Resource not found"
REVIEW_NOT_FOUND_MESSAGE = "The requested review does not exist"
CATEGORY_NOT_FOUND_MESSAGE = "Category not found"
ROUTE_NOT_FOUND_MESSAGE = "The requested route does not exist"
INVALID_COMMENT_MESSAGE = "Invalid comment received - must only include the keys: username & body"
MISSING_VOTE_INCREMENT_MESSAGE = "Value to increment votes by was not provided"
INVALID_SORT_BY_MESSAGE = "Invalid sort_by query"
INVALID_ORDER_MESSAGE = "Invalid order query"
INVALID_BODY_MESSAGE = "Invalid request body"
INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class AppError(Exception):
    """
    Base exception for conditions raised explicitly by the application.

    - message: human-friendly message (safe to show to clients)
    - status_code: HTTP status that accompanies the message
    - fields: optional list of request fields related to the error (logs only)
    """

    default_status_code: int = 500
    default_message: str = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: str | None = None, *, status_code: int | None = None,
                 fields: Iterable[str] | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.status_code = status_code if status_code is not None else self.default_status_code
        self.fields = list(fields) if fields else None

    def __str__(self) -> str:
        if self.fields:
            return f"{self.message} (fields: {', '.join(self.fields)})"
        return self.message

    def to_payload(self) -> dict:
        """
        Return the JSON body for this error: {"message": "..."}.
        `fields` is intentionally left out; it is for logs only.
        """
        return {"message": self.message}

    def http_status(self) -> int:
        return self.status_code


class StructuralInputError(AppError):
    """Malformed request shape: wrong keys, missing required value."""

    default_status_code = 400
    default_message = INVALID_BODY_MESSAGE


class InvalidQueryParameterError(StructuralInputError):
    """A listing query parameter outside its whitelist (sort_by, order)."""


class TypeMismatchError(AppError):
    """A value does not fit the expected column type (e.g. a non-numeric id)."""

    default_status_code = 400
    default_message = TYPE_MISMATCH_MESSAGE


class NotFoundError(AppError):
    """A referenced entity does not exist."""

    default_status_code = 404
    default_message = RESOURCE_NOT_FOUND_MESSAGE


class ReferentialViolationError(NotFoundError):
    """A write referenced a foreign key target that does not exist."""

    default_message = REFERENTIAL_VIOLATION_MESSAGE


class RouteNotFoundError(NotFoundError):
    """The request path (or path + method) is outside the API surface."""

    default_message = ROUTE_NOT_FOUND_MESSAGE

    def to_payload(self) -> dict:
        # Route-not-found echoes the status in the body as well.
        return {"status": self.status_code, "message": self.message}


__all__ = [
    "AppError",
    "StructuralInputError",
    "InvalidQueryParameterError",
    "TypeMismatchError",
    "NotFoundError",
    "ReferentialViolationError",
    "RouteNotFoundError",
    "TYPE_MISMATCH_MESSAGE",
    "REFERENTIAL_VIOLATION_MESSAGE",
    "RESOURCE_NOT_FOUND_MESSAGE",
    "REVIEW_NOT_FOUND_MESSAGE",
    "CATEGORY_NOT_FOUND_MESSAGE",
    "ROUTE_NOT_FOUND_MESSAGE",
    "INVALID_COMMENT_MESSAGE",
    "MISSING_VOTE_INCREMENT_MESSAGE",
    "INVALID_SORT_BY_MESSAGE",
    "INVALID_ORDER_MESSAGE",
    "INVALID_BODY_MESSAGE",
    "INTERNAL_ERROR_MESSAGE",
]
