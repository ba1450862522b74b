"""Core models, interfaces and context for the transformer."""

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.exceptions import (
    ConfigurationError,
    FilterValueError,
    NegatedRangeError,
    NegationError,
    TransformerError,
    UnsupportedNegationError,
)
from elastic_to_typesense.core.interfaces import (
    IFieldMatchStrategy,
    IResultMapper,
    IValueTransformer,
    ValueTransformerContext,
)
from elastic_to_typesense.core.models import (
    ElasticSchema,
    TransformerOptions,
    TransformOutcome,
    TransformResult,
    TypesenseField,
    TypesenseQuery,
    TypesenseSchema,
)

__all__ = [
    "TransformContext",
    "ConfigurationError",
    "FilterValueError",
    "NegatedRangeError",
    "NegationError",
    "TransformerError",
    "UnsupportedNegationError",
    "IFieldMatchStrategy",
    "IResultMapper",
    "IValueTransformer",
    "ValueTransformerContext",
    "ElasticSchema",
    "TransformerOptions",
    "TransformOutcome",
    "TransformResult",
    "TypesenseField",
    "TypesenseQuery",
    "TypesenseSchema",
]
