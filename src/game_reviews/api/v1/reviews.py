"""
Review API endpoints.

Path ids are declared as `str` on purpose: a non-integer id must reach
`parse_identifier` and come back as the 400 type-mismatch error, not as
FastAPI's own validation response.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from game_reviews.core.dependencies import DbSession
from game_reviews.schemas import (
    CommentListResponse,
    CommentRead,
    CreatedCommentResponse,
    ReviewListResponse,
    ReviewRead,
    ReviewResponse,
    ReviewWithCommentCount,
    UpdatedReviewResponse,
)
from game_reviews.services import comment_service, review_service

router = APIRouter(prefix="/reviews", tags=["reviews"])

JsonBody = Annotated[dict[str, Any] | None, Body()]


@router.get("", response_model=ReviewListResponse)
async def get_reviews(
    db: DbSession,
    category: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
) -> ReviewListResponse:
    """List reviews, optionally filtered by category and sorted."""
    rows = await review_service.list_reviews(db, category=category, sort_by=sort_by, order=order)
    return ReviewListResponse(reviews=[ReviewWithCommentCount.model_validate(dict(row)) for row in rows])


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review_by_id(review_id: str, db: DbSession) -> ReviewResponse:
    row = await review_service.get_review(db, review_id)
    return ReviewResponse(review=ReviewWithCommentCount.model_validate(dict(row)))


@router.patch("/{review_id}", response_model=UpdatedReviewResponse)
async def patch_review_votes(review_id: str, db: DbSession, payload: JsonBody = None) -> UpdatedReviewResponse:
    """Body: {"inc_votes": <signed int>}."""
    row = await review_service.adjust_votes(db, review_id, payload)
    return UpdatedReviewResponse(updatedReview=ReviewRead.model_validate(dict(row)))


@router.get("/{review_id}/comments", response_model=CommentListResponse)
async def get_review_comments(review_id: str, db: DbSession) -> CommentListResponse:
    comments = await comment_service.list_comments(db, review_id)
    return CommentListResponse(comments=[CommentRead.model_validate(c) for c in comments])


@router.post(
    "/{review_id}/comments",
    response_model=CreatedCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def post_review_comment(review_id: str, db: DbSession, payload: JsonBody = None) -> CreatedCommentResponse:
    """Body: {"username": ..., "body": ...}; no other keys."""
    comment = await comment_service.add_comment(db, review_id, payload)
    return CreatedCommentResponse(createdComment=CommentRead.model_validate(comment))
