"""Query translation: filter expressions, clause dispatch, pagination."""

from elastic_to_typesense.query.dispatcher import (
    ClauseType,
    transform_clauses,
    transform_query_recursively,
)
from elastic_to_typesense.query.filter_expression import normalize_parentheses
from elastic_to_typesense.query.formatter import format_filter_value
from elastic_to_typesense.query.pagination import create_pagination_and_sort

__all__ = [
    "ClauseType",
    "transform_clauses",
    "transform_query_recursively",
    "normalize_parentheses",
    "format_filter_value",
    "create_pagination_and_sort",
]
