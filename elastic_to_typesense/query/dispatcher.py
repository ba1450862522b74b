"""
Recursive clause dispatcher.

Walks an Elasticsearch query object, hands every clause to its transformer
and combines the partial results into one Typesense query.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.models import TransformResult, TypesenseQuery
from elastic_to_typesense.query.clauses import (
    transform_bool,
    transform_exists,
    transform_function_score,
    transform_geo_distance,
    transform_match,
    transform_match_all,
    transform_multi_match,
    transform_prefix,
    transform_range,
    transform_term,
    transform_terms,
)
from elastic_to_typesense.query.filter_expression import FilterNode, and_all, render_filter
from elastic_to_typesense.query.results import MATCH_ALL, ClauseResult, merge_params

logger = logging.getLogger(__name__)


class ClauseType(str, Enum):
    """Elasticsearch clauses with a Typesense translation."""

    MATCH = "match"
    MATCH_ALL = "match_all"
    TERM = "term"
    TERMS = "terms"
    RANGE = "range"
    EXISTS = "exists"
    PREFIX = "prefix"
    MULTI_MATCH = "multi_match"
    BOOL = "bool"
    FUNCTION_SCORE = "function_score"
    GEO_DISTANCE = "geo_distance"

    @classmethod
    def decode(cls, key: Any) -> Optional["ClauseType"]:
        """Clause type for a query key, or None for unsupported keys."""
        try:
            return cls(key)
        except ValueError:
            return None


ClauseTransformer = Callable[[Mapping[str, Any], TransformContext], ClauseResult]

CLAUSE_TRANSFORMERS: Dict[ClauseType, ClauseTransformer] = {
    ClauseType.MATCH: transform_match,
    ClauseType.MATCH_ALL: transform_match_all,
    ClauseType.TERM: transform_term,
    ClauseType.TERMS: transform_terms,
    ClauseType.RANGE: transform_range,
    ClauseType.EXISTS: transform_exists,
    ClauseType.PREFIX: transform_prefix,
    ClauseType.MULTI_MATCH: transform_multi_match,
    ClauseType.BOOL: transform_bool,
    ClauseType.FUNCTION_SCORE: transform_function_score,
    ClauseType.GEO_DISTANCE: transform_geo_distance,
}


def transform_clauses(query: Any, ctx: TransformContext) -> ClauseResult:
    """
    Transform every clause of a query object.

    Unknown keys and malformed clause payloads become warnings; the remaining
    clauses are still translated. Filter fragments are AND-combined in key
    order with duplicates removed.

    Args:
        query: Elasticsearch query object (the value of ``"query"``)
        ctx: Transform context

    Returns:
        Combined filter fragment, search parameters and warnings
    """
    if not isinstance(query, Mapping):
        return ClauseResult.empty("Query must be an object")

    fragments: List[Optional[FilterNode]] = []
    params: Dict[str, Any] = {}
    warnings: List[str] = []

    for key, payload in query.items():
        clause_type = ClauseType.decode(key)
        if clause_type is None:
            logger.debug("Unsupported clause %r", key)
            warnings.append(f'Unsupported clause: "{key}"')
            continue

        if not isinstance(payload, Mapping):
            warnings.append(f'Unsupported clause: "{key}"')
            continue

        result = CLAUSE_TRANSFORMERS[clause_type](payload, ctx)
        fragments.append(result.filter)
        merge_params(params, result.params)
        warnings.extend(result.warnings)

    return ClauseResult(filter=and_all(fragments), params=params, warnings=warnings)


def transform_query_recursively(query: Any, ctx: TransformContext) -> TransformResult:
    """
    Transform a query object into Typesense search parameters.

    The result always carries a search text (``*`` unless a clause supplied
    one) and a normalized ``filter_by`` when any clause produced a filter.
    """
    result = transform_clauses(query, ctx)
    typesense_query = TypesenseQuery(
        **{"q": MATCH_ALL, **result.params, "filter_by": render_filter(result.filter)}
    )
    return TransformResult(query=typesense_query, warnings=result.warnings)
