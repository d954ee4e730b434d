"""
API v1 Router
"""

from fastapi import APIRouter

from game_reviews.api.v1 import categories, comments, reviews, users

router = APIRouter()

# Include all endpoint routers
router.include_router(categories.router)
router.include_router(reviews.router)
router.include_router(comments.router)
router.include_router(users.router)

__all__ = ["router"]
