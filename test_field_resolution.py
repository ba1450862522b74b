"""
Tests for field resolution, automatic mapping, mismatch hints and result
mapping.
"""

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.models import ElasticSchema, TypesenseSchema
from elastic_to_typesense.execution.result_mapper import ResultMapper, create_default_mapper
from elastic_to_typesense.schema.auto_mapping import apply_auto_mapping
from elastic_to_typesense.schema.field_resolver import get_typesense_field, resolve_mapped_field
from elastic_to_typesense.schema.hints import suggest_transform_hints

TYPESENSE_SCHEMA = TypesenseSchema.model_validate(
    {
        "fields": [
            {"name": "title", "type": "string"},
            {"name": "product_price", "type": "float"},
            {"name": "created_at", "type": "string"},
            {"name": "brand", "type": "string", "facet": True},
        ]
    }
)


def test_mapping_lookup_then_identity():
    ctx = TransformContext(property_mapping={"name": "title"})
    assert resolve_mapped_field("name", ctx) == "title"
    assert resolve_mapped_field("other", ctx) == "other"


def test_schema_validates_resolved_name():
    ctx = TransformContext(
        property_mapping={"price": "product_price", "ghost": "missing"},
        typesense_schema=TYPESENSE_SCHEMA,
    )
    assert resolve_mapped_field("price", ctx) == "product_price"
    assert resolve_mapped_field("title", ctx) == "title"
    assert resolve_mapped_field("ghost", ctx) is None
    assert resolve_mapped_field("unknown", ctx) is None


def test_empty_field_names_never_resolve():
    ctx = TransformContext(property_mapping={"": "title"})
    assert resolve_mapped_field("", ctx) is None
    assert resolve_mapped_field(None, ctx) is None


def test_keyword_subfield_falls_back_to_base_field():
    ctx = TransformContext(typesense_schema=TYPESENSE_SCHEMA)
    assert resolve_mapped_field("brand.keyword", ctx) == "brand"

    mapped_ctx = TransformContext(
        property_mapping={"brand.keyword": "brand"}, typesense_schema=TYPESENSE_SCHEMA
    )
    assert resolve_mapped_field("brand.keyword", mapped_ctx) == "brand"


def test_get_typesense_field():
    ctx = TransformContext(typesense_schema=TYPESENSE_SCHEMA)
    assert get_typesense_field("brand", ctx).facet is True
    assert get_typesense_field("nope", ctx) is None
    assert get_typesense_field("brand", TransformContext()) is None


def test_auto_mapping_prefers_exact_names_then_suffixes():
    elastic = ElasticSchema(
        properties={
            "title": {"type": "text"},
            "price": {"type": "float"},
            "sku": {"type": "keyword"},
        }
    )
    assert apply_auto_mapping(elastic, TYPESENSE_SCHEMA) == {
        "title": "title",
        "price": "product_price",
    }


def test_hints_report_missing_fields_and_date_types():
    elastic = ElasticSchema(
        properties={
            "title": {"type": "text"},
            "created_at": {"type": "date"},
            "sku": {"type": "keyword"},
        }
    )
    assert suggest_transform_hints(elastic, TYPESENSE_SCHEMA) == [
        'Field "created_at" is a date, but TS field "created_at" is type "string". '
        "Consider coercion.",
        'No Typesense field for Elasticsearch field "sku"',
    ]


def test_hints_use_custom_match_strategy():
    elastic = ElasticSchema(properties={"price": {"type": "float"}})
    strategy = lambda elastic_field, ts_field: ts_field.endswith(elastic_field)
    assert suggest_transform_hints(elastic, TYPESENSE_SCHEMA, strategy) == []


def test_result_mapper_renames_nested_documents():
    mapper = ResultMapper({"name": "title", "price": "product_price"})
    document = {
        "title": "Laptop",
        "product_price": 999,
        "variants": [{"title": "13 inch"}, "plain"],
        "meta": {"title": "nested"},
    }
    assert mapper(document) == {
        "name": "Laptop",
        "price": 999,
        "variants": [{"name": "13 inch"}, "plain"],
        "meta": {"name": "nested"},
    }


def test_default_mapper_handles_lists():
    mapper = create_default_mapper({"name": "title"})
    assert mapper([{"title": "a"}, {"id": "2"}]) == [{"name": "a"}, {"id": "2"}]
    assert mapper("not a document") == "not a document"
