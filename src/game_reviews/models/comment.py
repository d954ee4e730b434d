from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from datetime import datetime
from game_reviews.database.base import Base


class Comment(Base):
    """
    SQLAlchemy model for a comment on a review.

    `comment_id` and `created_at` are assigned by the database at insert; `votes`
    starts at 0. The review and author foreign keys are enforced by storage, and a
    violation surfaces as a referential error (404) through the error pipeline.
    """
    __tablename__ = "comments"
    # New ids are always greater than any id ever issued, even after deletes.
    __table_args__ = {"sqlite_autoincrement": True}

    comment_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    body: Mapped[str] = mapped_column(Text, nullable=False)

    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    author: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("users.username"),
        nullable=False,
    )

    review_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("reviews.review_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Comment(comment_id={self.comment_id!r}, review_id={self.review_id!r})>"
