"""Category API endpoints."""

from fastapi import APIRouter

from game_reviews.core.dependencies import DbSession
from game_reviews.schemas import CategoryListResponse, CategoryRead
from game_reviews.services import catalog_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse)
async def get_categories(db: DbSession) -> CategoryListResponse:
    categories = await catalog_service.list_categories(db)
    return CategoryListResponse(categories=[CategoryRead.model_validate(c) for c in categories])
