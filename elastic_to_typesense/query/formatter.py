"""
Typesense filter literal formatting.

Every value that ends up in a filter expression is rendered here.
"""

import math
from typing import Any

from elastic_to_typesense.core.exceptions import FilterValueError

# String spellings rendered as bare literals instead of quoted strings
LITERAL_STRINGS = {
    "true": "true",
    "false": "false",
    "null": "null",
    "undefined": "null",
}


def format_number(value: Any) -> str:
    """Render a number the way the filter grammar expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def quote_string(value: str) -> str:
    """Double-quote a string, escaping backslashes and inner quotes."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_filter_value(value: Any) -> str:
    """
    Format a value as a Typesense filter literal.

    Args:
        value: None, bool, number, string or a list of those

    Returns:
        The literal text

    Raises:
        FilterValueError: If the value (or a list item) has no literal form
    """
    if value is None:
        return "null"

    if isinstance(value, (list, tuple)):
        return "[" + ",".join(format_filter_value(v) for v in value) + "]"

    if isinstance(value, str):
        literal = LITERAL_STRINGS.get(value)
        if literal is not None:
            return literal
        return quote_string(value)

    if isinstance(value, (bool, int, float)):
        return format_number(value)

    raise FilterValueError(value)
