"""
Error classification & translation pipeline.

An ordered tuple of classifier functions. Each classifier looks at an exception and
either returns a final `ErrorResponse` or `None` ("not mine, continue"). Order matters:

    1. storage type mismatch       -> 400
    2. storage referential failure -> 404
    3. application condition       -> the error's own status + message
    4. catch-all                   -> 500 with a fixed message

Route-not-found is handled before this chain by the HTTP layer (see
api/error_handlers.py) because it never reaches a route handler.

The pipeline holds no state; `translate_error` can be called from any handler.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from .base import (
    AppError,
    RouteNotFoundError,
    TYPE_MISMATCH_MESSAGE,
    REFERENTIAL_VIOLATION_MESSAGE,
    INTERNAL_ERROR_MESSAGE,
)
from .storage_classifier import StorageErrorKind, classify_storage_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ErrorResponse:
    """Client-visible outcome of an error: HTTP status plus JSON body."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)
    classifier: str = "catch_all"


Classifier = Callable[[BaseException], ErrorResponse | None]


# =================================================================================================================
# Classifiers
# =================================================================================================================

def storage_type_mismatch(exc: BaseException) -> ErrorResponse | None:
    if classify_storage_error(exc) is StorageErrorKind.TYPE_MISMATCH:
        return ErrorResponse(400, {"message": TYPE_MISMATCH_MESSAGE}, "storage_type_mismatch")
    return None


def storage_referential_integrity(exc: BaseException) -> ErrorResponse | None:
    if classify_storage_error(exc) is StorageErrorKind.REFERENTIAL:
        return ErrorResponse(404, {"message": REFERENTIAL_VIOLATION_MESSAGE}, "storage_referential_integrity")
    return None


def application_condition(exc: BaseException) -> ErrorResponse | None:
    """
    Pass application errors through verbatim. A 5xx AppError is not passed through:
    it goes to the catch-all so its message never reaches the client.
    """
    if isinstance(exc, AppError) and exc.http_status() < 500:
        return ErrorResponse(exc.http_status(), exc.to_payload(), "application_condition")
    return None


def catch_all(exc: BaseException) -> ErrorResponse:
    return ErrorResponse(500, {"message": INTERNAL_ERROR_MESSAGE}, "catch_all")


ERROR_PIPELINE: tuple[Classifier, ...] = (
    storage_type_mismatch,
    storage_referential_integrity,
    application_condition,
)


def translate_error(exc: BaseException, pipeline: tuple[Classifier, ...] = ERROR_PIPELINE) -> ErrorResponse:
    """
    Run `exc` through the classifiers in order and return the first match.

    Unclassified errors are logged with their traceback here and mapped to a generic
    500; nothing from the original exception is copied into the response.
    """
    for classifier in pipeline:
        response = classifier(exc)
        if response is not None:
            return response

    logger.error(
        "errors.unclassified",
        exc_info=(type(exc), exc, exc.__traceback__),
        extra={"error_type": type(exc).__name__},
    )
    return catch_all(exc)


def route_not_found() -> ErrorResponse:
    error = RouteNotFoundError()
    return ErrorResponse(error.http_status(), error.to_payload(), "route_not_found")


__all__ = [
    "ErrorResponse",
    "ERROR_PIPELINE",
    "storage_type_mismatch",
    "storage_referential_integrity",
    "application_condition",
    "catch_all",
    "translate_error",
    "route_not_found",
]
