from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from game_reviews.database.session import get_async_session

# Route parameter type for the request-scoped DB session.
# Tests swap the session by overriding `get_async_session` on the app.
DbSession = Annotated[AsyncSession, Depends(get_async_session)]
