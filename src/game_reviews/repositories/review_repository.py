"""
Review repository: single-review lookup, the filtered listing and vote increments.

Review reads always come back as plain mappings (review columns + comment_count),
because comment_count is an aggregate and not an attribute of the ORM model.
"""

from typing import Any, Mapping, Sequence
import logging

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.exceptions.base import NotFoundError, REVIEW_NOT_FOUND_MESSAGE
from game_reviews.exceptions.mapper import db_error_handler
from game_reviews.models import Review
from game_reviews.queries.reviews_query import ReviewFilters, base_reviews_select, build_reviews_query
from game_reviews.validators import parse_identifier, ensure_vote_increment
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ReviewRepository(BaseRepository[Review]):
    """Repository for Review entity operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(Review, db)

    # =================================================================================================================
    # Read Operations
    # =================================================================================================================

    async def get_review_by_id(self, review_id: Any) -> Mapping[str, Any]:
        """
        Fetch one review with its comment_count.

        A non-integer id is rejected before any query is sent.

        Raises:
            TypeMismatchError: `review_id` is not an integer (400)
            NotFoundError: no review with that id (404)
        """
        review_id = parse_identifier(review_id, field="review_id")

        query = base_reviews_select().where(Review.review_id == review_id)

        async with db_error_handler(self.db, "reviews.get_by_id"):
            result = await self.db.execute(query)
            row = result.mappings().one_or_none()

        if row is None:
            logger.info("repo.reviews.not_found", extra={"review_id": review_id})
            raise NotFoundError(REVIEW_NOT_FOUND_MESSAGE, fields=["review_id"])

        return row

    async def list_reviews(self, filters: ReviewFilters | None = None) -> Sequence[Mapping[str, Any]]:
        """Run the listing query for `filters`; an empty sequence is a valid result."""
        query = build_reviews_query(filters)

        async with db_error_handler(self.db, "reviews.list"):
            result = await self.db.execute(query)
            rows = result.mappings().all()

        logger.debug("repo.reviews.list", extra={"count": len(rows)})
        return rows

    # =================================================================================================================
    # Update Operations
    # =================================================================================================================

    async def update_votes(self, inc_votes: Any, review_id: int) -> Mapping[str, Any]:
        """
        Add `inc_votes` (may be negative) to the review's votes and return the updated row.

        Only presence of `inc_votes` is checked here. A value the database cannot use as
        an integer fails in storage and is classified by the error pipeline.

        Raises:
            StructuralInputError: `inc_votes` missing (before storage is touched)
            NotFoundError: the review vanished between the caller's existence check and the update
        """
        inc_votes = ensure_vote_increment(inc_votes)

        # The increment is computed by the database (votes = votes + :inc), so concurrent
        # updates never lose each other's votes.
        stmt = (
            update(Review)
            .where(Review.review_id == review_id)
            .values(votes=Review.votes + inc_votes)
            .returning(*Review.__table__.columns)
            .execution_options(synchronize_session=False)
        )

        async with db_error_handler(self.db, "reviews.update_votes"):
            result = await self.db.execute(stmt)
            row = result.mappings().one_or_none()

        if row is None:
            raise NotFoundError(REVIEW_NOT_FOUND_MESSAGE, fields=["review_id"])

        logger.info("repo.reviews.votes_updated", extra={"review_id": review_id, "inc_votes": inc_votes})
        return row
