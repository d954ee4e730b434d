"""
Comment orchestration: listing (with the empty-result disambiguation), creation
and deletion.
"""

from typing import Any
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.models import Comment
from game_reviews.repositories import CommentRepository, ExistenceTarget, check_exists
from game_reviews.validators import parse_identifier

logger = logging.getLogger(__name__)


async def list_comments(db: AsyncSession, review_id: Any) -> list[Comment]:
    """
    Comments for a review, newest first.

    An empty result triggers a review existence check: a review without comments
    yields [], a missing review raises NotFoundError.
    """
    review_id = parse_identifier(review_id, field="review_id")

    comments = await CommentRepository(db).list_by_review(review_id)
    if not comments:
        await check_exists(db, ExistenceTarget.REVIEW, review_id)

    return comments


async def add_comment(db: AsyncSession, review_id: Any, payload: Any) -> Comment:
    """
    Insert a comment and commit.

    A missing review or author is not pre-checked; the storage foreign key failure
    is translated to 404 by the error pipeline.
    """
    review_id = parse_identifier(review_id, field="review_id")

    comment = await CommentRepository(db).insert_comment(payload, review_id)
    await db.commit()

    logger.info(
        "service.comments.created",
        extra={"review_id": review_id, "comment_id": comment.comment_id},
    )
    return comment


async def remove_comment(db: AsyncSession, comment_id: Any) -> None:
    comment_id = parse_identifier(comment_id, field="comment_id")

    # Existence is re-checked right before the delete so a missing id is a 404, not a silent no-op.
    await check_exists(db, ExistenceTarget.COMMENT, comment_id)

    await CommentRepository(db).delete_comment(comment_id)
    await db.commit()

    logger.info("service.comments.deleted", extra={"comment_id": comment_id})
