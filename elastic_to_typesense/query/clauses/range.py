"""
``range`` clause.
"""

from typing import Any, List, Mapping, Optional

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.exceptions import FilterValueError
from elastic_to_typesense.query.filter_expression import Comparison, Operator, and_all
from elastic_to_typesense.query.results import ClauseResult
from elastic_to_typesense.query.values import format_value
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field

RANGE_OPERATORS = {
    "gte": Operator.GTE,
    "lte": Operator.LTE,
    "gt": Operator.GT,
    "lt": Operator.LT,
}

# Accepted but without a Typesense equivalent
IGNORED_RANGE_OPTIONS = {"format", "time_zone", "boost", "relation", "_name"}


def transform_range(range_query: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    """
    Transform an Elasticsearch ``range`` clause into comparison filters.

    Bound values go through reserved keyword resolution (``"now"``) and schema
    coercion. A ``null`` bound is treated as unbounded.
    """
    warnings: List[str] = []
    parts: List[Optional[Comparison]] = []

    for field, conditions in range_query.items():
        mapped = resolve_mapped_field(field, ctx)
        if mapped is None:
            warnings.append(f'Skipped unmapped field "{field}"')
            continue

        if not isinstance(conditions, Mapping):
            warnings.append(f'Range conditions must be an object for "{field}"')
            continue

        for op, raw in conditions.items():
            if op in IGNORED_RANGE_OPTIONS or raw is None:
                continue

            operator = RANGE_OPERATORS.get(op)
            if operator is None:
                warnings.append(f'Unsupported range operator "{op}" on field "{field}"')
                continue

            if isinstance(raw, (Mapping, list, tuple)):
                warnings.append(f'Unsupported range value for "{field}"')
                continue

            try:
                literal = format_value(field, mapped, raw, ctx)
            except FilterValueError:
                warnings.append(f'Unsupported range value for "{field}"')
                continue

            parts.append(Comparison(field=mapped, operator=operator, value=literal))

    return ClauseResult(filter=and_all(parts), warnings=warnings)
