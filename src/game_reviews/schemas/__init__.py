from .category import CategoryRead, CategoryListResponse
from .user import UserRead, UserListResponse
from .review import (
    ReviewRead,
    ReviewWithCommentCount,
    ReviewResponse,
    ReviewListResponse,
    UpdatedReviewResponse,
)
from .comment import CommentRead, CommentListResponse, CreatedCommentResponse

__all__ = [
    "CategoryRead",
    "CategoryListResponse",
    "UserRead",
    "UserListResponse",
    "ReviewRead",
    "ReviewWithCommentCount",
    "ReviewResponse",
    "ReviewListResponse",
    "UpdatedReviewResponse",
    "CommentRead",
    "CommentListResponse",
    "CreatedCommentResponse",
]
