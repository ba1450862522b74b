"""
Field mapping resolution.

Maps Elasticsearch field names to Typesense field names using the property
mapping and validates the result against the Typesense schema.
"""

import logging
from typing import Optional

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.models import TypesenseField

logger = logging.getLogger(__name__)

KEYWORD_SUFFIX = ".keyword"


def resolve_mapped_field(
    field: Optional[str], ctx: TransformContext
) -> Optional[str]:
    """
    Resolve an Elasticsearch field name to a Typesense field name.

    Lookup order is the property mapping, then identity. When a Typesense
    schema is configured the resolved name must exist in it. A ``.keyword``
    sub-field falls back to its base field when it cannot be resolved.

    Args:
        field: Elasticsearch field name
        ctx: Transform context

    Returns:
        Typesense field name, or None when the field is empty or unmapped
    """
    if not field:
        return None

    mapped = _lookup(field, ctx)
    if mapped is None and field.endswith(KEYWORD_SUFFIX):
        mapped = _lookup(field[: -len(KEYWORD_SUFFIX)], ctx)

    if mapped is None:
        logger.debug("Field %r has no Typesense counterpart", field)
    return mapped


def _lookup(field: str, ctx: TransformContext) -> Optional[str]:
    mapped = ctx.property_mapping.get(field, field)
    if ctx.typesense_schema is not None and not ctx.typesense_schema.has_field(mapped):
        return None
    return mapped


def get_typesense_field(
    typesense_field: str, ctx: TransformContext
) -> Optional[TypesenseField]:
    """Schema descriptor for a resolved Typesense field, if a schema is set."""
    if ctx.typesense_schema is None:
        return None
    return ctx.typesense_schema.get_field(typesense_field)
