"""Schema-driven field resolution and value coercion."""

from elastic_to_typesense.schema.auto_mapping import apply_auto_mapping
from elastic_to_typesense.schema.coercion import (
    coerce_value_from_schema,
    is_date_like_field,
    is_numeric,
)
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field
from elastic_to_typesense.schema.hints import suggest_transform_hints
from elastic_to_typesense.schema.reserved_keywords import resolve_reserved_keyword

__all__ = [
    "apply_auto_mapping",
    "coerce_value_from_schema",
    "is_date_like_field",
    "is_numeric",
    "resolve_mapped_field",
    "suggest_transform_hints",
    "resolve_reserved_keyword",
]
