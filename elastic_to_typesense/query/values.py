"""
Value pipeline shared by the leaf clause transformers.

reserved keyword -> schema coercion -> value transformer hook -> formatting
"""

from typing import Any

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.interfaces import ValueTransformerContext
from elastic_to_typesense.query.formatter import format_filter_value
from elastic_to_typesense.schema.coercion import coerce_value_from_schema
from elastic_to_typesense.schema.field_resolver import get_typesense_field
from elastic_to_typesense.schema.reserved_keywords import resolve_reserved_keyword


def apply_value_transformer(
    elastic_field: str, typesense_field: str, value: Any, ctx: TransformContext
) -> Any:
    """
    Run the configured value transformer, if any.

    Args:
        elastic_field: Field name from the Elasticsearch query
        typesense_field: Resolved Typesense field name
        value: Value to transform
        ctx: Transform context

    Returns:
        Transformed value, or the original value without a transformer
    """
    if ctx.value_transformer is None:
        return value

    elastic_field_schema = None
    if ctx.elastic_schema is not None:
        elastic_field_schema = ctx.elastic_schema.properties.get(elastic_field)

    context = ValueTransformerContext(
        elastic_field=elastic_field,
        typesense_field=typesense_field,
        typesense_schema=ctx.typesense_schema,
        elastic_schema=ctx.elastic_schema,
        elastic_field_schema=elastic_field_schema,
        typesense_field_schema=get_typesense_field(typesense_field, ctx),
    )
    return ctx.value_transformer(typesense_field, value, context)


def prepare_value(
    elastic_field: str, typesense_field: str, value: Any, ctx: TransformContext
) -> Any:
    """Resolve reserved keywords, coerce to the schema type and apply the hook."""
    value = resolve_reserved_keyword(typesense_field, value, ctx.typesense_schema)
    value = coerce_value_from_schema(
        typesense_field, value, ctx.typesense_schema, source_field=elastic_field
    )
    return apply_value_transformer(elastic_field, typesense_field, value, ctx)


def format_value(
    elastic_field: str, typesense_field: str, value: Any, ctx: TransformContext
) -> str:
    """
    Prepare and format a single value or a list of values.

    Raises:
        FilterValueError: If the prepared value has no literal form
    """
    if isinstance(value, (list, tuple)):
        prepared = [prepare_value(elastic_field, typesense_field, v, ctx) for v in value]
        return format_filter_value(prepared)
    return format_filter_value(prepare_value(elastic_field, typesense_field, value, ctx))
