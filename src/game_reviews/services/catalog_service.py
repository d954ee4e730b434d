from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.models import Category, User
from game_reviews.repositories import CategoryRepository, UserRepository


async def list_categories(db: AsyncSession) -> list[Category]:
    return await CategoryRepository(db).list_categories()


async def list_users(db: AsyncSession) -> list[User]:
    return await UserRepository(db).list_users()
