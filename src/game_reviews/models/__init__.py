"""
Centralized access to all database models of the reviews API.

    from game_reviews.models import Category, User, Review, Comment

Importing this package also registers every table on `Base.metadata`, which is what
`create_all` in the test suite relies on.
"""

from .category import Category
from .user import User
from .review import Review
from .comment import Comment

__all__ = [
    "Category",
    "User",
    "Review",
    "Comment",
]
