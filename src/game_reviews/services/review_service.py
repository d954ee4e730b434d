"""
Review orchestration.

Each function runs one endpoint's steps in order (validate, check existence,
read or mutate) and stops at the first failure. Mutating functions commit once at
the end; nothing is retried.
"""

from typing import Any, Mapping, Sequence
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.exceptions.base import CATEGORY_NOT_FOUND_MESSAGE
from game_reviews.queries.reviews_query import ReviewFilters
from game_reviews.repositories import ExistenceTarget, ReviewRepository, check_exists
from game_reviews.validators import parse_identifier, extract_vote_increment

logger = logging.getLogger(__name__)


async def get_review(db: AsyncSession, review_id: Any) -> Mapping[str, Any]:
    return await ReviewRepository(db).get_review_by_id(review_id)


async def list_reviews(db: AsyncSession, category: str | None = None, sort_by: str | None = None,
                       order: str | None = None) -> Sequence[Mapping[str, Any]]:
    """
    Validate the listing parameters, then fetch.

    When `category` is given it must name an existing category (404 otherwise); a
    real category without reviews returns an empty list.
    """
    filters = ReviewFilters.from_params(category=category, sort_by=sort_by, order=order)

    if filters.category is not None:
        await check_exists(db, ExistenceTarget.CATEGORY, filters.category, CATEGORY_NOT_FOUND_MESSAGE)

    return await ReviewRepository(db).list_reviews(filters)


async def adjust_votes(db: AsyncSession, review_id: Any, payload: Any) -> Mapping[str, Any]:
    """
    Apply `payload["inc_votes"]` to a review.

    Order: id type, presence of inc_votes, review existence, update, commit.
    """
    review_id = parse_identifier(review_id, field="review_id")
    inc_votes = extract_vote_increment(payload)

    await check_exists(db, ExistenceTarget.REVIEW, review_id)

    updated = await ReviewRepository(db).update_votes(inc_votes, review_id)
    await db.commit()

    logger.info("service.reviews.votes_adjusted", extra={"review_id": review_id})
    return updated
