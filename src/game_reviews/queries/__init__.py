from .reviews_query import (
    SortColumn,
    SortOrder,
    ReviewFilters,
    base_reviews_select,
    build_reviews_query,
    build_reviews_statement,
    compile_query,
)

__all__ = [
    "SortColumn",
    "SortOrder",
    "ReviewFilters",
    "base_reviews_select",
    "build_reviews_query",
    "build_reviews_statement",
    "compile_query",
]
