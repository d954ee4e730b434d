"""
Comment repository: listing by review, insert and delete.
"""

from typing import Any
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.models import Comment
from game_reviews.exceptions.mapper import db_error_handler
from game_reviews.validators import validate_comment_payload
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class CommentRepository(BaseRepository[Comment]):
    """Repository for Comment entity operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(Comment, db)

    async def list_by_review(self, review_id: int) -> list[Comment]:
        """
        Comments of one review, newest first.

        An empty list is ambiguous (no comments, or no such review); the caller
        resolves it with an existence check.
        """
        query = (
            select(Comment)
            .where(Comment.review_id == review_id)
            .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
        )

        async with db_error_handler(self.db, "comments.list_by_review"):
            result = await self.db.execute(query)
            comments = list(result.scalars().all())

        logger.debug("repo.comments.list_by_review", extra={"review_id": review_id, "count": len(comments)})
        return comments

    async def insert_comment(self, payload: Any, review_id: int) -> Comment:
        """
        Validate `payload` and insert it as a new comment on `review_id`.

        The review is not checked first: if it (or the author) does not exist the
        foreign key failure propagates and becomes a 404 in the error pipeline.

        Raises:
            StructuralInputError: payload is not exactly {username, body}
        """
        data = validate_comment_payload(payload)

        return await self.create(
            review_id=review_id,
            author=data["username"],
            body=data["body"],
            votes=0,
        )

    async def delete_comment(self, comment_id: int) -> bool:
        """Delete one comment. Existence is checked by the caller."""
        return await self.delete(comment_id)
