"""
Query transformer - main entry point.

Holds the configuration (property mapping, schemas, hooks) and translates
Elasticsearch search requests into Typesense search parameters.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.models import (
    TransformerOptions,
    TransformOutcome,
    TransformResult,
    TypesenseQuery,
)
from elastic_to_typesense.execution.result_mapper import create_default_mapper
from elastic_to_typesense.query.dispatcher import transform_query_recursively
from elastic_to_typesense.query.pagination import create_pagination_and_sort
from elastic_to_typesense.schema.auto_mapping import apply_auto_mapping
from elastic_to_typesense.schema.hints import suggest_transform_hints

logger = logging.getLogger(__name__)

INVALID_INPUT = "Input must be an object"


class QueryTransformer:
    """
    Translates Elasticsearch search requests to Typesense search parameters.

    The configuration is read-only after construction, so one instance can
    serve concurrent ``transform`` calls.
    """

    def __init__(self, options: Optional[Union[TransformerOptions, Mapping[str, Any]]] = None):
        """
        Initialize query transformer.

        Args:
            options: TransformerOptions or an equivalent dict
        """
        if options is None:
            options = TransformerOptions()
        elif not isinstance(options, TransformerOptions):
            options = TransformerOptions.model_validate(options)
        self.options = options

        self.property_mapping = self._build_property_mapping(options)
        self.context = TransformContext(
            property_mapping=self.property_mapping,
            typesense_schema=options.typesense_schema,
            elastic_schema=options.elastic_schema,
            default_score_field=options.default_score_field,
            value_transformer=options.value_transformer,
        )
        self._hints = self._build_hints(options)

    @staticmethod
    def _uses_auto_mapping(options: TransformerOptions) -> bool:
        return (
            options.auto_map_properties
            and options.elastic_schema is not None
            and options.typesense_schema is not None
        )

    @classmethod
    def _build_property_mapping(cls, options: TransformerOptions) -> Dict[str, str]:
        if cls._uses_auto_mapping(options):
            return apply_auto_mapping(options.elastic_schema, options.typesense_schema)
        return dict(options.property_mapping)

    @classmethod
    def _build_hints(cls, options: TransformerOptions) -> List[str]:
        if not cls._uses_auto_mapping(options):
            return []
        return suggest_transform_hints(
            options.elastic_schema, options.typesense_schema, options.field_match_strategy
        )

    def transform(self, request: Any) -> TransformOutcome:
        """
        Transform an Elasticsearch search request.

        Args:
            request: Search request body (``{"query": ..., "sort": ..., "from": .., "size": ..}``)

        Returns:
            TransformOutcome with the Typesense query and warnings, or an error
            when the request is not an object
        """
        if not isinstance(request, Mapping):
            return TransformOutcome.failure(INVALID_INPUT)

        main = transform_query_recursively(request.get("query", {}), self.context)
        pagination = create_pagination_and_sort(request, self.context)

        query = TypesenseQuery(
            **{**main.query.model_dump(exclude_none=True), **pagination.params}
        )
        warnings = [*main.warnings, *pagination.warnings, *self._hints]
        if warnings:
            logger.debug("Transformed with %d warning(s)", len(warnings))

        return TransformOutcome.success(TransformResult(query=query, warnings=warnings))

    def extend(self, **overrides: Any) -> "QueryTransformer":
        """
        Create a new transformer with some options replaced.

        The property mapping is merged (overrides win on conflicts); every
        other provided option replaces the current one.
        """
        data = {
            name: getattr(self.options, name)
            for name in TransformerOptions.model_fields
        }
        mapping = {**self.options.property_mapping, **(overrides.pop("property_mapping", None) or {})}
        data.update(overrides)
        data["property_mapping"] = mapping
        return QueryTransformer(TransformerOptions.model_validate(data))

    def map_results_to_elastic(self, documents: Any) -> Any:
        """
        Rename Typesense document fields back to Elasticsearch names.

        Uses the configured mapper when one was given; its return value
        (possibly awaitable) is passed through.
        """
        mapper = self.options.map_results_to_elastic_schema or create_default_mapper(
            self.property_mapping
        )
        return mapper(documents)


def create_transformer(
    options: Optional[Union[TransformerOptions, Mapping[str, Any]]] = None,
) -> QueryTransformer:
    """Create a configured QueryTransformer."""
    return QueryTransformer(options)
