from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func
from datetime import datetime
from game_reviews.database.base import Base


class Review(Base):
    """
    SQLAlchemy model for a game review.

    `comment_count` is deliberately not a column: it is aggregated from comments on
    every read (see queries/reviews_query.py).
    """
    __tablename__ = "reviews"
    __table_args__ = (
        # Postgres enforces this through the column type; SQLite would keep a REAL.
        CheckConstraint("votes = CAST(votes AS INTEGER)", name="votes_is_integer"),
        {"sqlite_autoincrement": True},
    )

    review_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    title: Mapped[str] = mapped_column(String(300), nullable=False)

    review_body: Mapped[str] = mapped_column(Text, nullable=False)

    designer: Mapped[str | None] = mapped_column(String(200), nullable=True)

    review_img_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Only ever changed by a signed increment; may go negative.
    votes: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    category: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("categories.slug"),
        nullable=False,
        index=True,
    )

    owner: Mapped[str] = mapped_column(
        String(100),
        ForeignKey("users.username"),
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Review(review_id={self.review_id!r}, title={self.title!r})>"
