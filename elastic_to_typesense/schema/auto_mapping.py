"""
Automatic property mapping between an Elasticsearch and a Typesense schema.
"""

import logging
from typing import Dict

from elastic_to_typesense.core.models import ElasticSchema, TypesenseSchema

logger = logging.getLogger(__name__)


def apply_auto_mapping(
    elastic: ElasticSchema, typesense: TypesenseSchema
) -> Dict[str, str]:
    """
    Build a property mapping by matching field names.

    An exact name match wins; otherwise the first Typesense field whose name
    ends with ``_<elastic field>`` (or the reverse) is used. Elasticsearch
    fields without a match are left out.
    """
    mapping: Dict[str, str] = {}
    names = [f.name for f in typesense.fields]

    for elastic_field in elastic.properties:
        if elastic_field in names:
            mapping[elastic_field] = elastic_field
            continue
        for ts_name in names:
            if ts_name.endswith(f"_{elastic_field}") or elastic_field.endswith(
                f"_{ts_name}"
            ):
                mapping[elastic_field] = ts_name
                break

    logger.debug("Auto-mapped %d of %d fields", len(mapping), len(elastic.properties))
    return mapping
