"""
Elasticsearch to Typesense - query translation layer.

Main entry point for translating Elasticsearch search requests into
Typesense search parameters.
"""

from elastic_to_typesense.core.models import (
    ElasticSchema,
    TransformerOptions,
    TransformOutcome,
    TransformResult,
    TypesenseQuery,
    TypesenseSchema,
)
from elastic_to_typesense.transformer import QueryTransformer, create_transformer

__all__ = [
    "QueryTransformer",
    "create_transformer",
    "ElasticSchema",
    "TransformerOptions",
    "TransformOutcome",
    "TransformResult",
    "TypesenseQuery",
    "TypesenseSchema",
]
