"""
``bool`` clause: must / should / must_not / filter.

Each group's sub-queries go back through the dispatcher. ``must_not``
fragments are negated structurally; a fragment that cannot be negated is
dropped with a warning rather than emitted incorrectly.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.exceptions import NegatedRangeError, UnsupportedNegationError
from elastic_to_typesense.query.filter_expression import (
    FilterNode,
    Group,
    and_all,
    dedupe,
    negate,
    or_all,
)
from elastic_to_typesense.query.results import ClauseResult, merge_params

logger = logging.getLogger(__name__)

BOOL_GROUPS = ("must", "should", "must_not", "filter")
BOOL_OPTIONS = {"minimum_should_match", "boost", "_name"}

SKIPPED_NEGATED_RANGE = "Skipped must_not clause with unsupported negated range filter"
UNPARSABLE_MUST_NOT = "Could not parse must_not clauses into valid Typesense filter expressions"


def _as_list(queries: Any) -> List[Any]:
    if queries is None:
        return []
    if isinstance(queries, Mapping):
        return [queries]
    if isinstance(queries, (list, tuple)):
        return list(queries)
    return [queries]


def _positive_group(
    queries: List[Any],
    ctx: TransformContext,
    params: Dict[str, Any],
    warnings: List[str],
    disjunctive: bool,
) -> Optional[FilterNode]:
    from elastic_to_typesense.query.dispatcher import transform_clauses

    fragments = []
    for query in queries:
        sub = transform_clauses(query, ctx)
        warnings.extend(sub.warnings)
        merge_params(params, sub.params)
        if sub.filter is not None:
            fragments.append(Group(inner=sub.filter))

    return or_all(fragments) if disjunctive else and_all(fragments)


def _negated_group(
    queries: List[Any],
    ctx: TransformContext,
    params: Dict[str, Any],
    warnings: List[str],
) -> Optional[FilterNode]:
    from elastic_to_typesense.query.dispatcher import transform_clauses

    negated_ctx = ctx.negate()
    fragments = []
    for query in queries:
        sub = transform_clauses(query, negated_ctx)
        warnings.extend(sub.warnings)
        merge_params(params, sub.params)
        fragments.append(sub.filter)

    unique = dedupe(fragments)
    negated = []
    for fragment in unique:
        try:
            negated.append(negate(fragment))
        except NegatedRangeError:
            logger.debug("Dropping must_not group: cannot negate %s", fragment.render())
            warnings.append(SKIPPED_NEGATED_RANGE)
            return None
        except UnsupportedNegationError:
            warnings.append(f"Unsupported negation format: {fragment.render()}")

    if unique and not negated:
        warnings.append(UNPARSABLE_MUST_NOT)
    return and_all(negated)


def _check_minimum_should_match(bool_query: Mapping[str, Any], warnings: List[str]) -> None:
    value = bool_query.get("minimum_should_match")
    if value is None or str(value).strip() in ("1", "100%"):
        return
    warnings.append(
        f'minimum_should_match "{value}" is not supported; should clauses are OR-combined'
    )


def transform_bool(bool_query: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    """
    Transform an Elasticsearch ``bool`` clause.

    ``must`` and ``filter`` sub-queries are AND-combined, ``should`` sub-queries
    OR-combined and ``must_not`` sub-queries negated and AND-combined. The
    groups themselves are AND-combined, each parenthesized when there is more
    than one.
    """
    warnings: List[str] = []
    params: Dict[str, Any] = {}
    groups: List[FilterNode] = []

    for key in bool_query:
        if key not in BOOL_GROUPS and key not in BOOL_OPTIONS:
            warnings.append(f'Unsupported bool option: "{key}"')
    _check_minimum_should_match(bool_query, warnings)

    for key in BOOL_GROUPS:
        queries = _as_list(bool_query.get(key))
        if not queries:
            continue

        if key == "must_not":
            node = _negated_group(queries, ctx, params, warnings)
        else:
            node = _positive_group(
                queries, ctx, params, warnings, disjunctive=key == "should"
            )
        if node is not None:
            groups.append(node)

    if len(groups) > 1:
        groups = [Group(inner=group) for group in groups]

    return ClauseResult(filter=and_all(groups), params=params, warnings=warnings)
