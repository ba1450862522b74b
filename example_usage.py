"""
Example usage of the Elasticsearch to Typesense transformer.
"""

import json

from elastic_to_typesense import create_transformer

TYPESENSE_SCHEMA = {
    "fields": [
        {"name": "title", "type": "string"},
        {"name": "city", "type": "string", "facet": True},
        {"name": "status", "type": "string", "facet": True},
        {"name": "price", "type": "float"},
        {"name": "created_at", "type": "int64"},
        {"name": "location", "type": "geopoint"},
    ]
}

PROPERTY_MAPPING = {
    "name": "title",
    "address.city": "city",
    "geo": "location",
}


def lowercase_cities(typesense_field, value, context):
    """Value transformer: city names are indexed lower-case."""
    if typesense_field == "city" and isinstance(value, str):
        return value.lower()
    return value


def main():
    transformer = create_transformer(
        {
            "property_mapping": PROPERTY_MAPPING,
            "typesense_schema": TYPESENSE_SCHEMA,
            "value_transformer": lowercase_cities,
        }
    )

    request = {
        "query": {
            "bool": {
                "must": [
                    {"multi_match": {"query": "loft", "fields": ["name^2", "description"]}},
                    {"term": {"address.city": "Berlin"}},
                ],
                "filter": [{"range": {"price": {"gte": 100, "lte": "500"}}}],
                "must_not": [{"terms": {"status": ["draft", "archived"]}}],
            }
        },
        "sort": [{"_score": {"order": "desc"}}, {"price": "asc"}],
        "from": 20,
        "size": 10,
    }

    outcome = transformer.transform(request)
    if not outcome.ok:
        print(f"Error: {outcome.error}")
        return

    print("=== Typesense query ===")
    print(json.dumps(outcome.value.query.to_params(), indent=2))
    print("\n=== Warnings ===")
    for warning in outcome.value.warnings:
        print(f"  - {warning}")

    documents = [{"title": "Sunny loft", "city": "berlin", "price": 250.0}]
    print("\n=== Documents with Elasticsearch field names ===")
    print(json.dumps(transformer.map_results_to_elastic(documents), indent=2))


if __name__ == "__main__":
    main()
