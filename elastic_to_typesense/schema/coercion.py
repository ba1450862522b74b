"""
Schema-driven value coercion.

Normalizes raw Elasticsearch values to the declared Typesense field type
before they are formatted into a filter expression.
"""

import math
import re
from datetime import timezone
from decimal import Decimal
from typing import Any, Optional

from dateutil import parser as dt_parser

from elastic_to_typesense.core.models import TypesenseSchema

INTEGER_TYPES = {"int32", "int64"}
FLOAT_TYPES = {"float"}
BOOL_TYPES = {"bool"}
STRING_TYPES = {"string", "geopoint"}

NULLISH_STRINGS = {"null", "undefined"}

DATE_FIELD_SUFFIXES = ("_date", "_time")
DATE_FIELD_PREFIXES = ("date_", "time_")
DATE_FIELD_MARKERS = ("created", "updated", "timestamp")

_NUMERIC_RE = re.compile(r"^-?\d+(\.\d+)?(e[-+]?\d+)?$", re.IGNORECASE)


def is_numeric(value: Any) -> bool:
    """True for finite numbers and strings that spell one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return math.isfinite(value)
    if not isinstance(value, str) or not value.strip():
        return False
    if not _NUMERIC_RE.match(value.strip()):
        return False
    return math.isfinite(float(value))


def _to_int(value: str) -> int:
    # exact for integers beyond float precision (int64 ids)
    text = value.strip()
    match = _NUMERIC_RE.match(text)
    if match.group(1) is None and match.group(2) is None:
        return int(text)
    return int(Decimal(text))


def is_date_like_field(name: Optional[str]) -> bool:
    """Field-name heuristic for timestamps stored as epoch integers."""
    if not name:
        return False
    lowered = name.lower()
    return (
        lowered.endswith(DATE_FIELD_SUFFIXES)
        or lowered.startswith(DATE_FIELD_PREFIXES)
        or any(marker in lowered for marker in DATE_FIELD_MARKERS)
    )


def parse_date_to_epoch(value: str) -> Optional[int]:
    """Parse an ISO-8601 date string into epoch milliseconds (UTC if naive)."""
    try:
        moment = dt_parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return int(moment.timestamp() * 1000)


def _is_nullish(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value.strip().lower() in NULLISH_STRINGS


def _zero_value(base_type: str) -> Any:
    if base_type in INTEGER_TYPES or base_type in FLOAT_TYPES:
        return 0
    if base_type in BOOL_TYPES:
        return False
    return ""


def _to_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def coerce_value_from_schema(
    field: str,
    value: Any,
    schema: Optional[TypesenseSchema] = None,
    source_field: Optional[str] = None,
) -> Any:
    """
    Coerce a value to the type declared for ``field`` in the Typesense schema.

    Args:
        field: Resolved Typesense field name
        value: Raw value (after reserved keyword resolution)
        schema: Typesense schema; without it the value is returned unchanged
        source_field: Elasticsearch field name, used by the date heuristic

    Returns:
        Coerced value
    """
    if schema is None:
        return value

    ts_field = schema.get_field(field)
    if ts_field is None:
        return value

    base_type = ts_field.type.removesuffix("[]")

    if _is_nullish(value):
        return _zero_value(base_type)

    if base_type in INTEGER_TYPES:
        if isinstance(value, str):
            if is_numeric(value):
                return _to_int(value)
            if is_date_like_field(field) or is_date_like_field(source_field):
                epoch = parse_date_to_epoch(value)
                if epoch is not None:
                    return epoch
        return value

    if base_type in FLOAT_TYPES:
        if isinstance(value, str) and is_numeric(value):
            return float(value)
        return value

    if base_type in BOOL_TYPES:
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return bool(value)

    if base_type in STRING_TYPES:
        return _to_string(value)

    return value
