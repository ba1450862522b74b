"""
Filter expression tree for Typesense ``filter_by``.

Clause transformers build small trees of comparisons joined with AND/OR;
the tree is rendered to text once, at the end of a transformation. Negation
is a structural rewrite over the tree.
"""

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from elastic_to_typesense.core.exceptions import (
    NegatedRangeError,
    UnsupportedNegationError,
)
from elastic_to_typesense.query.formatter import format_number


class Operator(str, Enum):
    """Comparison operators of the filter grammar."""

    EQ = "="
    NE = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="


# Operator -> operator of the negated comparison. GT has no sound negation.
NEGATED_OPERATORS = {
    Operator.EQ: Operator.NE,
    Operator.LT: Operator.GTE,
    Operator.LTE: Operator.GT,
    Operator.GTE: Operator.LT,
}


class FilterNode(BaseModel):
    """Base class of filter expression nodes."""

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        raise NotImplementedError


class Comparison(FilterNode):
    """``field:OP value`` where ``value`` is an already formatted literal."""

    field: str
    operator: Operator
    value: str

    def render(self) -> str:
        return f"{self.field}:{self.operator.value} {self.value}"


class GeoRadius(FilterNode):
    """``field:(lat, lon, radius km)``"""

    field: str
    latitude: float
    longitude: float
    radius_km: float

    def render(self) -> str:
        return (
            f"{self.field}:({format_number(self.latitude)}, "
            f"{format_number(self.longitude)}, {format_number(self.radius_km)} km)"
        )


class Group(FilterNode):
    """Explicit parentheses around a sub-expression."""

    inner: FilterNode

    def render(self) -> str:
        return f"({self.inner.render()})"


class Conjunction(FilterNode):
    operands: Tuple[FilterNode, ...]

    def render(self) -> str:
        parts = []
        for operand in self.operands:
            text = operand.render()
            # && binds tighter than ||
            if isinstance(operand, Disjunction):
                text = f"({text})"
            parts.append(text)
        return " && ".join(parts)


class Disjunction(FilterNode):
    operands: Tuple[FilterNode, ...]

    def render(self) -> str:
        return " || ".join(operand.render() for operand in self.operands)


def dedupe(nodes: Iterable[Optional[FilterNode]]) -> List[FilterNode]:
    """Drop empty and repeated fragments, keeping first-seen order."""
    seen = {}
    for node in nodes:
        if node is None:
            continue
        seen.setdefault(node.render(), node)
    return list(seen.values())


def and_all(nodes: Iterable[Optional[FilterNode]]) -> Optional[FilterNode]:
    """AND-combine fragments; a single fragment is returned as is."""
    unique = dedupe(nodes)
    if not unique:
        return None
    if len(unique) == 1:
        return unique[0]
    return Conjunction(operands=tuple(unique))


def or_all(nodes: Iterable[Optional[FilterNode]]) -> Optional[FilterNode]:
    """OR-combine fragments; a single fragment is returned as is."""
    unique = dedupe(nodes)
    if not unique:
        return None
    if len(unique) == 1:
        return unique[0]
    return Disjunction(operands=tuple(unique))


def negate(node: FilterNode) -> FilterNode:
    """
    Negate a filter expression.

    Comparisons flip their operator, AND/OR are swapped (De Morgan) and one
    layer of grouping is dropped.

    Raises:
        NegatedRangeError: The expression contains a strict ``>`` comparison
        UnsupportedNegationError: The expression has no negated form
    """
    if isinstance(node, Group):
        return negate(node.inner)

    if isinstance(node, Comparison):
        if node.operator is Operator.GT:
            raise NegatedRangeError(node.render())
        negated_op = NEGATED_OPERATORS.get(node.operator)
        if negated_op is None:
            raise UnsupportedNegationError(node.render())
        return node.model_copy(update={"operator": negated_op})

    if isinstance(node, Conjunction):
        return Group(inner=Disjunction(operands=tuple(negate(o) for o in node.operands)))

    if isinstance(node, Disjunction):
        return Conjunction(operands=tuple(negate(o) for o in node.operands))

    raise UnsupportedNegationError(node.render())


def normalize_parentheses(expression: str) -> str:
    """
    Strip redundant parentheses wrapping the whole expression.

    A layer is only removed when the opening and closing parenthesis belong
    to each other, so ``(a) && (b)`` is left alone. Parentheses inside quoted
    literals are ignored.
    """
    normalized = expression.strip()

    while normalized.startswith("(") and normalized.endswith(")"):
        inner = normalized[1:-1]
        if not _is_balanced(inner):
            break
        normalized = inner.strip()

    return normalized


def _is_balanced(text: str) -> bool:
    depth = 0
    in_quotes = False
    escaped = False
    for char in text:
        if in_quotes:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_quotes = False
            continue
        if char == '"':
            in_quotes = True
        elif char == "(":
            depth += 1
        elif char == ")":
            if depth == 0:
                return False
            depth -= 1
    return depth == 0


def render_filter(node: Optional[FilterNode]) -> Optional[str]:
    """Render and normalize a filter tree; None when there is nothing to filter."""
    if node is None:
        return None
    return normalize_parentheses(node.render()) or None
