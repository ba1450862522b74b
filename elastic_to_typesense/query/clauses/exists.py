"""
``exists`` clause: a not-null test that works for every field type.
"""

from typing import Any, Mapping

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.query.filter_expression import Comparison, Operator
from elastic_to_typesense.query.formatter import format_filter_value
from elastic_to_typesense.query.results import ClauseResult
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field


def transform_exists(exists: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    field = exists.get("field")
    if not isinstance(field, str) or not field:
        return ClauseResult.empty('Exists clause requires a "field" name')

    mapped = resolve_mapped_field(field, ctx)
    if mapped is None:
        return ClauseResult.empty(f'Could not resolve field "{field}" in exists clause')

    return ClauseResult(
        filter=Comparison(field=mapped, operator=Operator.NE, value=format_filter_value(None))
    )
