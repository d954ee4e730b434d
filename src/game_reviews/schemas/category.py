from pydantic import BaseModel

from .base import ORMModel


class CategoryRead(ORMModel):
    slug: str
    description: str


class CategoryListResponse(BaseModel):
    categories: list[CategoryRead]
