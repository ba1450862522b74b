"""
``prefix`` clause.

Typesense has no prefix filter; a prefix becomes a search for ``value*``
restricted to the mapped field.
"""

from typing import Any, Dict, Mapping

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.query.formatter import format_number
from elastic_to_typesense.query.results import ClauseResult
from elastic_to_typesense.query.values import apply_value_transformer
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field


def transform_prefix(prefix: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    """
    Transform an Elasticsearch ``prefix`` clause into search parameters.

    Args:
        prefix: ``{field: "val"}`` or ``{field: {"value": "val", "boost": 2}}``
        ctx: Transform context

    Returns:
        ``q``, ``query_by`` and, with a boost, ``query_by_weights``
    """
    fields = list(prefix)
    if not fields:
        return ClauseResult.empty("Empty prefix query")

    field = fields[0]
    warnings = []
    if len(fields) > 1:
        ignored = ", ".join(f'"{f}"' for f in fields[1:])
        warnings.append(f"Prefix query supports a single field; ignored {ignored}")

    mapped = resolve_mapped_field(field, ctx)
    if mapped is None:
        return ClauseResult.empty(*warnings, f'Skipped unmapped field "{field}"')

    data = prefix[field]
    if isinstance(data, Mapping):
        value = data.get("value")
        boost = data.get("boost")
    else:
        value = data
        boost = None

    if not isinstance(value, str) or not value:
        return ClauseResult.empty(*warnings, f'Invalid prefix value for field "{field}"')

    value = apply_value_transformer(field, mapped, value, ctx)

    params: Dict[str, Any] = {"q": f"{value}*", "query_by": mapped}
    if isinstance(boost, (int, float)) and not isinstance(boost, bool):
        params["query_by_weights"] = format_number(boost)

    return ClauseResult(params=params, warnings=warnings)
