"""Comment API endpoints."""

from fastapi import APIRouter, Response, status

from game_reviews.core.dependencies import DbSession
from game_reviews.services import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: str, db: DbSession) -> Response:
    await comment_service.remove_comment(db, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
