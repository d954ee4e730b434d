from pydantic import BaseModel

from .base import ORMModel


class UserRead(ORMModel):
    username: str
    name: str
    avatar_url: str | None = None


class UserListResponse(BaseModel):
    users: list[UserRead]
