from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from game_reviews.database.base import Base


class Category(Base):
    """A board-game category. Read-only through the API; referenced by reviews.category."""
    __tablename__ = "categories"

    slug: Mapped[str] = mapped_column(String(100), primary_key=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(slug={self.slug!r})>"
