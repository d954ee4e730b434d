from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from game_reviews.database.base import Base


class User(Base):
    """
    SQLAlchemy model for User.

    Users own reviews and author comments; both reference `username`, which is the
    natural primary key.
    """
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), primary_key=True)

    name: Mapped[str] = mapped_column(String(200), nullable=False)

    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<User(username={self.username!r})>"
