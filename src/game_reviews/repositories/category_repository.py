from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.models import Category
from .base_repository import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Read-only access to categories."""

    def __init__(self, db: AsyncSession):
        super().__init__(Category, db)

    async def list_categories(self) -> list[Category]:
        return await self.get_all(order_by=Category.slug.asc())
