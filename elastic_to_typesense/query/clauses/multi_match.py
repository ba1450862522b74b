"""
``multi_match`` clause.

Elasticsearch searches several (optionally boosted) fields; Typesense does
the same with ``q``, ``query_by`` and ``query_by_weights``.
"""

import re
from typing import Any, Dict, List, Mapping, Optional

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.query.formatter import format_number
from elastic_to_typesense.query.results import ClauseResult
from elastic_to_typesense.query.values import apply_value_transformer
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field

DEFAULT_WEIGHT = 10
BOOST_SCALE = 10
MAX_TYPOS = 2

_LEADING_INT_RE = re.compile(r"^\s*(-?\d+)")


def _weight(boost: Optional[str], field: str, warnings: List[str]) -> float:
    if not boost:
        return DEFAULT_WEIGHT
    try:
        return float(boost) * BOOST_SCALE
    except ValueError:
        warnings.append(f'Invalid boost "{boost}" for field "{field}"')
        return DEFAULT_WEIGHT


def _num_typos(fuzziness: Any, warnings: List[str]) -> Optional[int]:
    """Map Elasticsearch fuzziness onto Typesense's typo budget (0..2)."""
    if isinstance(fuzziness, str) and fuzziness.strip().upper().startswith("AUTO"):
        return MAX_TYPOS
    match = None
    if not isinstance(fuzziness, bool):
        match = _LEADING_INT_RE.match(str(fuzziness))
    if match is None or int(match.group(1)) < 0:
        warnings.append(f'Unsupported fuzziness "{fuzziness}"')
        return None
    return min(int(match.group(1)), MAX_TYPOS)


def transform_multi_match(multi_match: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    """
    Transform an Elasticsearch ``multi_match`` clause.

    Args:
        multi_match: ``{"query": ..., "fields": ["title^2", ...], "fuzziness": ..., "type": ...}``
        ctx: Transform context

    Returns:
        Search parameters; no filter
    """
    warnings: List[str] = []
    fields = multi_match.get("fields")

    if not isinstance(fields, (list, tuple)) or not fields:
        return ClauseResult.empty("Multi-match requires fields to be specified")

    query_text = multi_match.get("query")
    if isinstance(query_text, bool) or not isinstance(query_text, (str, int, float)):
        return ClauseResult.empty("Multi-match requires a query string")

    mapped_fields: List[str] = []
    weights: List[float] = []
    first_elastic_field: Optional[str] = None

    for entry in fields:
        if not isinstance(entry, str):
            warnings.append(f"Invalid multi_match field {entry!r}")
            continue
        name, _, boost = entry.partition("^")
        mapped = resolve_mapped_field(name, ctx)
        if mapped is None:
            warnings.append(f'Skipped unmapped field "{name}" in multi_match')
            continue
        if first_elastic_field is None:
            first_elastic_field = name
        mapped_fields.append(mapped)
        weights.append(_weight(boost, name, warnings))

    if not mapped_fields:
        warnings.append("No valid fields to search after mapping")
        return ClauseResult.empty(*warnings)

    query_text = apply_value_transformer(first_elastic_field, mapped_fields[0], query_text, ctx)

    params: Dict[str, Any] = {
        "q": str(query_text),
        "query_by": ",".join(mapped_fields),
    }
    if any(w != weights[0] for w in weights):
        params["query_by_weights"] = ",".join(format_number(w) for w in weights)

    fuzziness = multi_match.get("fuzziness")
    if fuzziness is not None:
        num_typos = _num_typos(fuzziness, warnings)
        if num_typos is not None:
            params["num_typos"] = num_typos

    match_type = multi_match.get("type")
    if match_type:
        if match_type == "phrase_prefix":
            params["prefix"] = True
        elif match_type == "phrase":
            # exact, in-order matches only
            params["num_typos"] = 0
        elif match_type != "best_fields":
            warnings.append(f'Unsupported multi_match type: "{match_type}"')

    return ClauseResult(params=params, warnings=warnings)
