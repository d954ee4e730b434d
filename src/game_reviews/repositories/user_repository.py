"""
User repository. Users are read-only through the API; they are referenced by
reviews.owner and comments.author.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity operations."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def list_users(self) -> list[User]:
        return await self.get_all(order_by=User.username.asc())
