"""
Tests for from/size and sort translation.
"""

import pytest

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.core.models import TypesenseSchema
from elastic_to_typesense.query.pagination import create_pagination_and_sort, transform_geo_sort


@pytest.fixture
def ctx():
    return TransformContext(property_mapping={"price": "product_price"})


def test_from_and_size_become_page_and_per_page(ctx):
    result = create_pagination_and_sort({"from": 20, "size": 10}, ctx)
    assert result.params == {"per_page": 10, "page": 3}
    assert result.warnings == []


def test_size_only(ctx):
    assert create_pagination_and_sort({"size": 25}, ctx).params == {"per_page": 25}


def test_misaligned_offset_warns(ctx):
    result = create_pagination_and_sort({"from": 15, "size": 10}, ctx)
    assert result.params == {"per_page": 10, "page": 2}
    assert result.warnings == ['"from" (15) is not a multiple of "size" (10); page 2 starts at offset 10']


def test_from_without_size_warns(ctx):
    result = create_pagination_and_sort({"from": 30}, ctx)
    assert result.params == {}
    assert result.warnings == ['"from" without a numeric "size" cannot be translated to a page']


def test_sort_forms(ctx):
    result = create_pagination_and_sort(
        {"sort": ["title", {"price": "desc"}, {"rating": {"order": "asc"}}]}, ctx
    )
    assert result.params == {"sort_by": "title:asc,product_price:desc,rating:asc"}


def test_sort_accepts_single_entry(ctx):
    assert create_pagination_and_sort({"sort": {"price": "desc"}}, ctx).params == {
        "sort_by": "product_price:desc"
    }


def test_invalid_sort_order_falls_back_to_asc(ctx):
    result = create_pagination_and_sort({"sort": [{"price": "sideways"}]}, ctx)
    assert result.params == {"sort_by": "product_price:asc"}
    assert result.warnings == ["Invalid sort order: sideways. Using 'asc' instead."]


def test_score_sort(ctx):
    assert create_pagination_and_sort({"sort": ["_score"]}, ctx).params == {
        "sort_by": "_text_match:desc"
    }
    assert create_pagination_and_sort({"sort": [{"_score": "asc"}]}, ctx).params == {
        "sort_by": "_text_match:asc"
    }
    custom = TransformContext(default_score_field="popularity:desc")
    assert create_pagination_and_sort({"sort": ["_score"]}, custom).params == {
        "sort_by": "popularity:desc"
    }


def test_invalid_score_order_falls_back_to_desc(ctx):
    result = create_pagination_and_sort({"sort": [{"_score": "sideways"}]}, ctx)
    assert result.params == {"sort_by": "_text_match:desc"}
    assert result.warnings == ["Invalid sort order: sideways. Using 'desc' instead."]


def test_unmapped_sort_field_is_skipped():
    ctx = TransformContext(
        typesense_schema=TypesenseSchema.model_validate({"fields": [{"name": "title", "type": "string"}]})
    )
    result = create_pagination_and_sort({"sort": ["rating", "title"]}, ctx)
    assert result.params == {"sort_by": "title:asc"}
    assert result.warnings == ['Skipped unmapped sort field "rating"']


def test_geo_distance_sort(ctx):
    result = create_pagination_and_sort(
        {"sort": [{"_geo_distance": {"location": {"lat": 10, "lon": 20.5}, "order": "desc", "unit": "km"}}]},
        ctx,
    )
    assert result.params == {"sort_by": "location(10,20.5):desc"}


def test_geo_sort_warnings(ctx):
    assert transform_geo_sort({"order": "asc"}, ctx) == (
        None,
        ["Invalid geo_distance sort: expected exactly one field with coordinates"],
    )
    assert transform_geo_sort({"location": {"lat": "a", "lon": 1}}, ctx) == (
        None,
        ["Invalid geo_distance coordinates for field 'location'"],
    )
    strict = TransformContext(typesense_schema=TypesenseSchema())
    assert transform_geo_sort({"pin": {"lat": 1, "lon": 2}}, strict) == (
        None,
        ["Unmapped geo field: pin"],
    )
