"""
Builder for the review listing query.

The listing supports three optional request parameters:

    category  free text, always sent to the database as a bound parameter
    sort_by   one of SortColumn; mapped to a column object, never interpolated
    order     "asc" | "desc" (case-sensitive)

Default direction depends on whether `sort_by` was given:

| sort_by given | order given | ORDER BY                  |
| ------------- | ----------- | ------------------------- |
| no            | no          | created_at DESC           |
| no            | yes         | created_at <order>        |
| yes           | no          | <sort_by> ASC             |
| yes           | yes         | <sort_by> <order>         |

`review_id ASC` is always appended so equal sort values come back in a stable order.
The builder is permissive about `category`: an unknown slug simply yields no rows.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any
import logging

from sqlalchemy import Integer, Select, func, select

from game_reviews.exceptions.base import (
    InvalidQueryParameterError,
    INVALID_SORT_BY_MESSAGE,
    INVALID_ORDER_MESSAGE,
)
from game_reviews.models import Comment, Review

logger = logging.getLogger(__name__)


class SortColumn(str, Enum):
    TITLE = "title"
    CATEGORY = "category"
    VOTES = "votes"
    DESIGNER = "designer"
    OWNER = "owner"
    CREATED_AT = "created_at"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Closed mapping from the public sort key to the column it orders by.
SORT_COLUMNS = {
    SortColumn.TITLE: Review.title,
    SortColumn.CATEGORY: Review.category,
    SortColumn.VOTES: Review.votes,
    SortColumn.DESIGNER: Review.designer,
    SortColumn.OWNER: Review.owner,
    SortColumn.CREATED_AT: Review.created_at,
}


@dataclass(frozen=True)
class ReviewFilters:
    category: str | None = None
    sort_by: SortColumn | None = None
    order: SortOrder | None = None

    @classmethod
    def from_params(cls, category: str | None = None, sort_by: str | None = None,
                    order: str | None = None) -> "ReviewFilters":
        """
        Validate raw query-string values.

        sort_by is checked before order, so a request with both invalid reports sort_by.

        Raises:
            InvalidQueryParameterError
        """
        sort_column = None
        if sort_by is not None:
            try:
                sort_column = SortColumn(sort_by)
            except ValueError:
                logger.info("query.reviews.invalid_sort_by", extra={"sort_by": sort_by})
                raise InvalidQueryParameterError(INVALID_SORT_BY_MESSAGE, fields=["sort_by"]) from None

        sort_order = None
        if order is not None:
            try:
                sort_order = SortOrder(order)
            except ValueError:
                logger.info("query.reviews.invalid_order", extra={"order": order})
                raise InvalidQueryParameterError(INVALID_ORDER_MESSAGE, fields=["order"]) from None

        return cls(category=category, sort_by=sort_column, order=sort_order)


def comment_count_column():
    """COUNT(comments.comment_id) cast to integer, labelled `comment_count`."""
    return func.count(Comment.comment_id).cast(Integer).label("comment_count")


def base_reviews_select() -> Select:
    """All review columns plus comment_count: reviews LEFT JOIN comments GROUP BY review."""
    return (
        select(*Review.__table__.columns, comment_count_column())
        .select_from(Review)
        .outerjoin(Comment, Comment.review_id == Review.review_id)
        .group_by(Review.review_id)
    )


def build_reviews_query(filters: ReviewFilters | None = None) -> Select:
    """
    Compose the listing query for `filters`.

    Pass an already validated ReviewFilters (see ReviewFilters.from_params).
    """
    filters = filters or ReviewFilters()
    query = base_reviews_select()

    if filters.category is not None:
        query = query.where(Review.category == filters.category)

    if filters.sort_by is not None:
        column = SORT_COLUMNS[filters.sort_by]
        direction = filters.order or SortOrder.ASC
    else:
        column = Review.created_at
        direction = filters.order or SortOrder.DESC

    ordering = column.asc() if direction is SortOrder.ASC else column.desc()
    query = query.order_by(ordering, Review.review_id.asc())

    logger.debug(
        "query.reviews.built",
        extra={
            "category_filter": filters.category is not None,
            "sort_by": column.key,
            "order": direction.value,
        },
    )
    return query


def compile_query(query: Select, dialect: Any = None) -> tuple[str, dict[str, Any]]:
    """
    Render `query` as (query_text, parameters) for inspection and logging.

    Values stay as bound parameters; nothing is inlined into the text.
    """
    compiled = query.compile(dialect=dialect)
    return str(compiled), dict(compiled.params)


def build_reviews_statement(category: str | None = None, sort_by: str | None = None,
                            order: str | None = None, dialect: Any = None) -> tuple[str, dict[str, Any]]:
    """Validate raw parameters and return the compiled listing query."""
    filters = ReviewFilters.from_params(category=category, sort_by=sort_by, order=order)
    return compile_query(build_reviews_query(filters), dialect=dialect)
