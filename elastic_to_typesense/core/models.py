"""
Shared data models for the Elasticsearch to Typesense transformer.
"""

from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TypesenseField(BaseModel):
    """Represents a single field of a Typesense collection."""

    model_config = ConfigDict(extra="allow")

    name: str
    type: str  # string, int32, int64, float, bool, geopoint, string[], ...
    optional: Optional[bool] = None
    facet: Optional[bool] = None


class TypesenseSchema(BaseModel):
    """Typesense collection schema (ordered field list)."""

    model_config = ConfigDict(extra="allow")

    fields: List[TypesenseField] = Field(default_factory=list)
    default_sorting_field: Optional[str] = None

    def get_field(self, name: str) -> Optional[TypesenseField]:
        """Return the field descriptor with the given name, if any."""
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def has_field(self, name: str) -> bool:
        return self.get_field(name) is not None


class ElasticSchema(BaseModel):
    """Elasticsearch index mapping (the ``properties`` block)."""

    model_config = ConfigDict(extra="allow")

    properties: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


class TypesenseQuery(BaseModel):
    """Typesense search parameters produced by a transformation."""

    model_config = ConfigDict(extra="allow")

    q: str = "*"
    filter_by: Optional[str] = None
    sort_by: Optional[str] = None
    page: Optional[int] = None
    per_page: Optional[int] = None
    query_by: Optional[str] = None
    query_by_weights: Optional[str] = None
    num_typos: Optional[int] = None
    prefix: Optional[bool] = None

    def to_params(self) -> Dict[str, Any]:
        """Plain parameter dict without unset entries."""
        return self.model_dump(exclude_none=True)


class TransformResult(BaseModel):
    """Translated query plus ordered diagnostics."""

    query: TypesenseQuery = Field(default_factory=TypesenseQuery)
    warnings: List[str] = Field(default_factory=list)


class TransformOutcome(BaseModel):
    """Top-level result of ``transform``: either a value or an error."""

    ok: bool = True
    value: Optional[TransformResult] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: TransformResult) -> "TransformOutcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "TransformOutcome":
        return cls(ok=False, error=error)


class TransformerOptions(BaseModel):
    """Configuration for a query transformer."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    property_mapping: Dict[str, str] = Field(
        default_factory=dict,
        description="Elasticsearch field name -> Typesense field name",
    )
    typesense_schema: Optional[TypesenseSchema] = None
    elastic_schema: Optional[ElasticSchema] = None
    auto_map_properties: bool = False
    field_match_strategy: Optional[Callable[[str, str], bool]] = None
    default_score_field: Optional[str] = Field(
        default=None,
        description="Sort expression used in place of an Elasticsearch _score sort",
    )
    value_transformer: Optional[Callable[..., Any]] = None
    map_results_to_elastic_schema: Optional[Callable[[Any], Any]] = None
