"""
Reserved keyword resolution (``"now"``).
"""

from datetime import datetime, timezone
from typing import Any, Optional

from elastic_to_typesense.core.models import TypesenseSchema

RESERVED_NOW = "now"
INTEGER_TYPES = ("int32", "int64")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def is_reserved_keyword(value: Any) -> bool:
    return isinstance(value, str) and value.strip().lower() == RESERVED_NOW


def to_iso_string(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def resolve_reserved_keyword(
    field: str, value: Any, typesense_schema: Optional[TypesenseSchema] = None
) -> Any:
    """
    Replace ``"now"`` with the current time typed for the Typesense field.

    Integer fields get epoch milliseconds, float fields the same as a float,
    anything else an ISO-8601 string. Without a schema entry for the field the
    value is returned unchanged.
    """
    if not is_reserved_keyword(value) or typesense_schema is None:
        return value

    ts_field = typesense_schema.get_field(field)
    if ts_field is None:
        return value

    moment = _now()
    epoch_ms = moment.timestamp() * 1000
    base_type = ts_field.type.removesuffix("[]")
    if base_type in INTEGER_TYPES:
        return int(epoch_ms)
    if base_type == "float":
        return float(epoch_ms)
    return to_iso_string(moment)
