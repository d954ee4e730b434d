"""
Repository layer initialization module.

Usage:
    from game_reviews.repositories import ReviewRepository, CommentRepository, check_exists
"""

from .base_repository import BaseRepository
from .existence import ExistenceTarget, check_exists
from .category_repository import CategoryRepository
from .user_repository import UserRepository
from .review_repository import ReviewRepository
from .comment_repository import CommentRepository

__all__ = [
    "BaseRepository",
    "ExistenceTarget",
    "check_exists",
    "CategoryRepository",
    "UserRepository",
    "ReviewRepository",
    "CommentRepository",
]
