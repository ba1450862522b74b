"""
``match`` and ``match_all`` clauses.

A ``match`` is translated to an exact-match filter; relevance scoring is
not preserved.
"""

from typing import Any, Mapping

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.query.clauses.term import equality_filters
from elastic_to_typesense.query.results import ClauseResult


def transform_match(match: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    return equality_filters(match, ctx, value_key="query", clause="match")


def transform_match_all(match_all: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    return ClauseResult()
