"""
``terms`` clause: membership filters using the ``field:= [a,b]`` syntax.
"""

from typing import Any, List, Mapping, Optional

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.exceptions import FilterValueError
from elastic_to_typesense.query.filter_expression import Comparison, Operator, and_all
from elastic_to_typesense.query.results import ClauseResult
from elastic_to_typesense.query.values import format_value
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field

TERMS_OPTIONS = {"boost", "_name"}


def transform_terms(terms: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    """
    Transform an Elasticsearch ``terms`` clause.

    Args:
        terms: ``{field: [values...]}``
        ctx: Transform context

    Returns:
        AND of one membership filter per field
    """
    warnings: List[str] = []
    parts: List[Optional[Comparison]] = []

    for field, values in terms.items():
        if field in TERMS_OPTIONS:
            continue

        mapped = resolve_mapped_field(field, ctx)
        if mapped is None:
            warnings.append(f'Skipped unmapped field "{field}"')
            continue

        if not isinstance(values, (list, tuple)):
            warnings.append(f'Terms clause for "{field}" must be an array')
            continue

        if not values:
            warnings.append(f'Terms clause for "{field}" has an empty value list')

        try:
            literal = format_value(field, mapped, list(values), ctx)
        except FilterValueError:
            warnings.append(f'Unsupported terms value type for "{field}"')
            continue

        parts.append(Comparison(field=mapped, operator=Operator.EQ, value=literal))

    return ClauseResult(filter=and_all(parts), warnings=warnings)
