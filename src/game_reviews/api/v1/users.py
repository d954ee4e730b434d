"""User API endpoints."""

from fastapi import APIRouter

from game_reviews.core.dependencies import DbSession
from game_reviews.schemas import UserListResponse, UserRead
from game_reviews.services import catalog_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserListResponse)
async def get_users(db: DbSession) -> UserListResponse:
    users = await catalog_service.list_users(db)
    return UserListResponse(users=[UserRead.model_validate(u) for u in users])
