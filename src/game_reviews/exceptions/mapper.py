import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .base import AppError
from .storage_classifier import StorageErrorKind, classify_storage_error

logger = logging.getLogger(__name__)


async def _rollback(db: AsyncSession, operation: str | None) -> None:
    try:
        await db.rollback()
    except SQLAlchemyError:
        # The original error is the one worth reporting; a failed rollback is logged only.
        logger.exception("db.rollback.failed", extra={"operation": operation})


# -----------------------
# Async context manager to DRY error handling in repositories
# -----------------------
@asynccontextmanager
async def db_error_handler(db: AsyncSession, operation: str | None = None):
    """
    Usage:
        async with db_error_handler(self.db, "comments.insert"):
            ... DB ops ...

    Rolls the session back on any storage error and re-raises the ORIGINAL exception,
    so the error pipeline still sees the driver's SQLSTATE. Expected storage
    conditions (type mismatch, missing FK target) are logged at INFO; anything else
    at ERROR with a stack trace. Application errors pass through untouched.
    """
    try:
        yield
    except AppError:
        raise
    except SQLAlchemyError as exc:
        await _rollback(db, operation)

        kind = classify_storage_error(exc)
        if kind is StorageErrorKind.UNKNOWN:
            logger.exception("db.operation.failed", extra={"operation": operation})
        else:
            logger.info(
                "db.operation.rejected",
                extra={"operation": operation, "storage_error": kind.value},
            )
        raise
