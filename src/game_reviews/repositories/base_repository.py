"""
Base repository class providing common database operations.

This class serves as a reusable foundation for repositories that interact with
the database using SQLAlchemy's async sessions. Model-specific repositories
inherit from it and add their own queries (the review listing, comment listing
by review, vote increments).

Repositories never commit: the service layer decides when a request's work is
final. Storage errors are not translated here; they propagate unchanged to the
error pipeline (see exceptions/pipeline.py).
"""

import time
import logging
from typing import TypeVar, Generic, Type, Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.orm import InstrumentedAttribute

from game_reviews.database.base import Base
from game_reviews.exceptions.mapper import db_error_handler

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)

# Setup logging
logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Args:
            model: The SQLAlchemy model class (e.g. Review, not Review()).
            db: The async database session, usually injected via a FastAPI dependency.
        """
        self.model = model
        self.db = db

    @property
    def primary_key(self) -> InstrumentedAttribute:
        """The model's (single-column) primary key attribute, e.g. Review.review_id."""
        pk_column = self.model.__mapper__.primary_key[0]
        return getattr(self.model, pk_column.key)

    def _operation(self, name: str) -> str:
        return f"{self.model.__tablename__}.{name}"

    # =================================================================================================================
    # Create Operations
    # =================================================================================================================

    async def create(self, **kwargs) -> ModelType:
        """
        Insert an entity and return it with server-generated fields loaded.

        Logging:
        - DEBUG: start event with the provided keys (not values).
        - INFO: success event with the new primary key and duration_ms.
        """
        logger.debug(
            "repo.create.start",
            extra={
                "model": self.model.__name__,
                "operation": "create",
                "provided_keys": sorted(kwargs.keys()),
            },
        )

        start = time.perf_counter()

        async with db_error_handler(self.db, self._operation("create")):
            entity = self.model(**kwargs)
            self.db.add(entity)
            # flush (not commit): sends the INSERT so the id / created_at defaults exist,
            # leaving the transaction open for the caller.
            await self.db.flush()
            await self.db.refresh(entity)

        logger.info(
            "repo.create.success",
            extra={
                "model": self.model.__name__,
                "operation": "create",
                "id": getattr(entity, self.primary_key.key, None),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        return entity

    # =================================================================================================================
    # Read Operations
    # =================================================================================================================

    async def get_all(self, order_by: InstrumentedAttribute | None = None) -> list[ModelType]:
        """
        Return every row of the table.

        Ordering: `order_by` when given, otherwise `created_at DESC` when the model has
        it, otherwise the primary key, so the result order is always defined.
        """
        query = select(self.model)

        if order_by is not None:
            query = query.order_by(order_by)
        elif hasattr(self.model, "created_at"):
            query = query.order_by(self.model.created_at.desc(), self.primary_key.asc())
        else:
            query = query.order_by(self.primary_key.asc())

        async with db_error_handler(self.db, self._operation("get_all")):
            result = await self.db.execute(query)
            entities = list(result.scalars().all())

        logger.debug("repo.get_all", extra={"model": self.model.__name__, "count": len(entities)})
        return entities

    # =================================================================================================================
    # Delete Operations
    # =================================================================================================================

    async def delete(self, entity_id: Any) -> bool:
        """
        Delete by primary key.

        Returns:
            True if a row was deleted, False if none matched.
        """
        async with db_error_handler(self.db, self._operation("delete")):
            result = await self.db.execute(
                delete(self.model).where(self.primary_key == entity_id)
            )

        deleted = result.rowcount > 0
        logger.info(
            "repo.delete",
            extra={"model": self.model.__name__, "id": entity_id, "deleted": deleted},
        )
        return deleted

    # =================================================================================================================
    # Validation / Existence Checks
    # =================================================================================================================

    async def exists(self, value: Any, column: InstrumentedAttribute | None = None) -> bool:
        """
        Check whether a row with `column == value` exists (primary key by default).

        Selects only the key column, never the full row.
        """
        column = column if column is not None else self.primary_key
        query = select(column).where(column == value).limit(1)

        async with db_error_handler(self.db, self._operation("exists")):
            result = await self.db.execute(query)
            found = result.first() is not None

        logger.debug(
            "repo.exists",
            extra={"model": self.model.__name__, "column": column.key, "exists": found},
        )
        return found
