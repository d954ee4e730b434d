"""Pydantic schemas for comment endpoints."""

from pydantic import BaseModel

from .base import ORMModel, UTCDatetime


class CommentRead(ORMModel):
    comment_id: int
    body: str
    votes: int
    author: str
    review_id: int
    created_at: UTCDatetime


class CommentListResponse(BaseModel):
    comments: list[CommentRead]


class CreatedCommentResponse(BaseModel):
    createdComment: CommentRead
