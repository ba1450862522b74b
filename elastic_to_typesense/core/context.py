"""
Transform context threaded through every clause transformer.
"""

from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from elastic_to_typesense.core.models import ElasticSchema, TypesenseSchema


class TransformContext(BaseModel):
    """
    Immutable per-call context.

    Children may only differ from their parent in ``negated``; use
    :meth:`negate` to obtain that variant instead of mutating.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    property_mapping: Dict[str, str] = Field(default_factory=dict)
    typesense_schema: Optional[TypesenseSchema] = None
    elastic_schema: Optional[ElasticSchema] = None
    negated: bool = False
    default_score_field: Optional[str] = None
    value_transformer: Optional[Callable[..., Any]] = None  # IValueTransformer

    def negate(self) -> "TransformContext":
        """Copy of this context with negation asserted."""
        if self.negated:
            return self
        return self.model_copy(update={"negated": True})
