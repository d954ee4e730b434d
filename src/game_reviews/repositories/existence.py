"""
Resource existence checks.

Which table and key column may be probed is fixed by `ExistenceTarget`; request
strings never pick the table or column, only the value (always a bound parameter).

Used two ways by the services:
- defensively, right before a dependent write (vote update, comment delete);
- diagnostically, after an empty comment listing, to tell "no comments" from
  "no such review".
"""

from enum import Enum
from typing import Any
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.exceptions.base import NotFoundError
from game_reviews.models import Category, Comment, Review
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class ExistenceTarget(str, Enum):
    REVIEW = "reviews.review_id"
    COMMENT = "comments.comment_id"
    CATEGORY = "categories.slug"


EXISTENCE_TARGETS = {
    ExistenceTarget.REVIEW: (Review, Review.review_id),
    ExistenceTarget.COMMENT: (Comment, Comment.comment_id),
    ExistenceTarget.CATEGORY: (Category, Category.slug),
}


async def check_exists(db: AsyncSession, target: ExistenceTarget, value: Any,
                       message: str | None = None) -> None:
    """
    Succeed silently when at least one row matches; raise NotFoundError otherwise.

    Args:
        db: session to query with
        target: whitelisted (table, column) pair
        value: the key to look for
        message: overrides the default "Resource not found" text

    Raises:
        NotFoundError (404)
    """
    model, column = EXISTENCE_TARGETS[target]

    if await BaseRepository(model, db).exists(value, column=column):
        return

    logger.info("repo.exists.not_found", extra={"target": target.value, "value": value})
    raise NotFoundError(message, fields=[column.key])
