"""
Pluggable interfaces for the transformer.

These protocols define the call contracts that callers implement to hook
into value normalization, result mapping and auto-mapping field matching.
"""

from typing import Any, Dict, Optional, Protocol

from pydantic import BaseModel, ConfigDict

from elastic_to_typesense.core.models import (
    ElasticSchema,
    TypesenseField,
    TypesenseSchema,
)


class ValueTransformerContext(BaseModel):
    """Field names and schema snapshots handed to a value transformer."""

    model_config = ConfigDict(frozen=True)

    elastic_field: str
    typesense_field: str
    typesense_schema: Optional[TypesenseSchema] = None
    elastic_schema: Optional[ElasticSchema] = None
    elastic_field_schema: Optional[Dict[str, Any]] = None
    typesense_field_schema: Optional[TypesenseField] = None


class IValueTransformer(Protocol):
    """
    Normalize a value before it is rendered into a filter or search text.

    Called by every leaf clause transformer right before formatting, e.g.
    for case folding or unit conversion.
    """

    def __call__(
        self, typesense_field: str, value: Any, context: ValueTransformerContext
    ) -> Any:
        """
        Transform a single value.

        Args:
            typesense_field: Resolved Typesense field name
            value: Value after reserved keyword resolution and coercion
            context: Field names and schemas for the value

        Returns:
            The value to format
        """
        ...


class IResultMapper(Protocol):
    """
    Map Typesense documents back to the Elasticsearch naming scheme.

    May return the mapped value directly or an awaitable producing it.
    """

    def __call__(self, documents: Any) -> Any:
        ...


class IFieldMatchStrategy(Protocol):
    """Decide whether an Elasticsearch field corresponds to a Typesense field."""

    def __call__(self, elastic_field: str, typesense_field: str) -> bool:
        ...
