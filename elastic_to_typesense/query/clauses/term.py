"""
Equality clauses: ``term`` and ``match``.
"""

from typing import Any, List, Mapping, Optional

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.exceptions import FilterValueError
from elastic_to_typesense.query.filter_expression import Comparison, Operator, and_all
from elastic_to_typesense.query.results import ClauseResult
from elastic_to_typesense.query.values import format_value
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field


def _unwrap(raw: Any, value_key: str) -> Any:
    # {field: {value_key: v, boost: ...}} -> v; boost has no filter equivalent
    if isinstance(raw, Mapping) and value_key in raw:
        return raw[value_key]
    return raw


def equality_filters(
    payload: Mapping[str, Any], ctx: TransformContext, value_key: str, clause: str
) -> ClauseResult:
    """
    Build ``field:= value`` comparisons for every field of the payload.

    Args:
        payload: ``{field: value}`` or ``{field: {value_key: value}}``
        ctx: Transform context
        value_key: Key holding the value in the object form
        clause: Clause name used in warnings

    Returns:
        AND of the comparisons; unmapped fields and unsupported values are
        skipped with a warning
    """
    warnings: List[str] = []
    parts: List[Optional[Comparison]] = []

    for field, raw in payload.items():
        mapped = resolve_mapped_field(field, ctx)
        if mapped is None:
            warnings.append(f'Skipped unmapped field "{field}"')
            continue

        value = _unwrap(raw, value_key)
        if isinstance(value, (Mapping, list, tuple)):
            warnings.append(f'Unsupported {clause} value type for "{field}"')
            continue

        try:
            literal = format_value(field, mapped, value, ctx)
        except FilterValueError:
            warnings.append(f'Unsupported {clause} value type for "{field}"')
            continue

        parts.append(Comparison(field=mapped, operator=Operator.EQ, value=literal))

    return ClauseResult(filter=and_all(parts), warnings=warnings)


def transform_term(term: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    """Transform an Elasticsearch ``term`` clause into exact-match filters."""
    return equality_filters(term, ctx, value_key="value", clause="term")
