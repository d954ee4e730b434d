"""
Request-aware logging filters.

- A contextvar holds the current request id. It survives `await`, so every log line
  emitted while serving one request (router, service, repository, error handler)
  carries the same id.
- RequestIdFilter copies it onto each LogRecord (`-` when there is none) so format
  strings can reference %(request_id)s safely.
- RedactFilter masks record attributes whose names look sensitive. Connection
  strings count: they embed the database password.
"""

import logging
from logging import LogRecord
import contextvars

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context and return the token to allow reset.
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantee every LogRecord has a `request_id` attribute.

    An id passed explicitly via `extra={"request_id": ...}` is kept; otherwise the
    contextvar value is used, falling back to "-".
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    SENSITIVE = {
        "password",
        "secret",
        "token",
        "authorization",
        "database_url",
        "sqlalchemy_database_url",
        "dsn",
        "postgres_password",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True
