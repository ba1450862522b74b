"""
``function_score`` clause: the inner query is kept, scoring is dropped.
"""

from typing import Any, Mapping

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.query.filter_expression import Group
from elastic_to_typesense.query.results import ClauseResult

SCORING_KEYS = ("functions", "script_score", "field_value_factor", "random_score")


def transform_function_score(
    function_score: Mapping[str, Any], ctx: TransformContext
) -> ClauseResult:
    """
    Transform the inner query of a ``function_score`` clause.

    The inner filter is wrapped in parentheses so it keeps its precedence
    when combined with sibling clauses.
    """
    from elastic_to_typesense.query.dispatcher import transform_clauses

    inner = function_score.get("query")
    if not inner:
        return ClauseResult.empty('Missing "query" in function_score')

    base = transform_clauses(inner, ctx)
    warnings = list(base.warnings)

    for key in SCORING_KEYS:
        if key not in function_score:
            continue
        if key == "functions":
            warnings.append("function_score.functions are not supported in Typesense")
        else:
            warnings.append(f"function_score.{key} is not supported in Typesense")

    node = Group(inner=base.filter) if base.filter is not None else None
    return ClauseResult(filter=node, params=base.params, warnings=warnings)
