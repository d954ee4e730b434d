# game_reviews/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py                  # App-level errors carrying status + client-safe message
# │   ├── storage_classifier.py    # SQLSTATE / message based classification of DB errors
# │   ├── mapper.py                # db_error_handler: rollback + log, re-raise unchanged
# │   └── pipeline.py              # Ordered classifier chain -> (status, body)

from .base import (
    AppError,
    StructuralInputError,
    InvalidQueryParameterError,
    TypeMismatchError,
    NotFoundError,
    ReferentialViolationError,
    RouteNotFoundError,
)
from .pipeline import ErrorResponse, translate_error, route_not_found

__all__ = [
    "AppError",
    "StructuralInputError",
    "InvalidQueryParameterError",
    "TypeMismatchError",
    "NotFoundError",
    "ReferentialViolationError",
    "RouteNotFoundError",
    "ErrorResponse",
    "translate_error",
    "route_not_found",
]
