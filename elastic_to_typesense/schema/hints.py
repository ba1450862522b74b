"""
Human-readable hints about schema mismatches.
"""

from typing import List, Optional

from elastic_to_typesense.core.interfaces import IFieldMatchStrategy
from elastic_to_typesense.core.models import ElasticSchema, TypesenseSchema

EPOCH_TYPES = ("int64", "int32")


def suggest_transform_hints(
    elastic: ElasticSchema,
    typesense: TypesenseSchema,
    match_strategy: Optional[IFieldMatchStrategy] = None,
) -> List[str]:
    """
    List Elasticsearch fields without a Typesense counterpart and date
    fields mapped onto non-epoch types.
    """
    hints: List[str] = []
    match = match_strategy or (lambda e, t: e == t)

    for elastic_field, elastic_meta in elastic.properties.items():
        ts_match = next(
            (f for f in typesense.fields if match(elastic_field, f.name)), None
        )
        if ts_match is None:
            hints.append(f'No Typesense field for Elasticsearch field "{elastic_field}"')
            continue

        if elastic_meta.get("type") == "date" and ts_match.type not in EPOCH_TYPES:
            hints.append(
                f'Field "{elastic_field}" is a date, but TS field "{ts_match.name}" '
                f'is type "{ts_match.type}". Consider coercion.'
            )

    return hints
