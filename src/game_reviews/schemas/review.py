"""Pydantic schemas for review endpoints."""

from pydantic import BaseModel, Field

from .base import ORMModel, UTCDatetime


class ReviewRead(ORMModel):
    """A review row as stored (no aggregate)."""

    review_id: int
    title: str
    review_body: str
    designer: str | None = None
    review_img_url: str | None = None
    votes: int
    category: str
    owner: str
    created_at: UTCDatetime


class ReviewWithCommentCount(ReviewRead):
    comment_count: int = Field(ge=0)


class ReviewResponse(BaseModel):
    review: ReviewWithCommentCount


class ReviewListResponse(BaseModel):
    reviews: list[ReviewWithCommentCount]


class UpdatedReviewResponse(BaseModel):
    updatedReview: ReviewRead
