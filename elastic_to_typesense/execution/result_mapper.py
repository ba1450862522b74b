"""
Result mapping back to the Elasticsearch naming scheme.

Renames Typesense document fields using the inverse of the property mapping.
"""

from typing import Any, Dict, Mapping

from elastic_to_typesense.core.interfaces import IResultMapper


class ResultMapper:
    """
    Maps Typesense documents to Elasticsearch field names.

    Nested objects and lists of objects are mapped recursively; fields
    without a mapping keep their name.
    """

    def __init__(self, property_mapping: Mapping[str, str]):
        """
        Initialize result mapper.

        Args:
            property_mapping: Elasticsearch field -> Typesense field mapping
        """
        self.inverse_mapping: Dict[str, str] = {
            typesense_field: elastic_field
            for elastic_field, typesense_field in property_mapping.items()
        }

    def __call__(self, documents: Any) -> Any:
        if isinstance(documents, list):
            return [self.map_document(doc) for doc in documents]
        return self.map_document(documents)

    def map_document(self, document: Any) -> Any:
        """Map a single document; non-mapping values are returned unchanged."""
        if not isinstance(document, Mapping):
            return document

        mapped: Dict[str, Any] = {}
        for typesense_field, value in document.items():
            elastic_field = self.inverse_mapping.get(typesense_field, typesense_field)
            if isinstance(value, Mapping):
                mapped[elastic_field] = self.map_document(value)
            elif isinstance(value, list):
                mapped[elastic_field] = [
                    self.map_document(item) if isinstance(item, Mapping) else item
                    for item in value
                ]
            else:
                mapped[elastic_field] = value
        return mapped


def create_default_mapper(property_mapping: Mapping[str, str]) -> IResultMapper:
    """Default result mapper built from the inverse property mapping."""
    return ResultMapper(property_mapping)
