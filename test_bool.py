"""
Tests for bool query translation, including must_not negation.
"""

import pytest

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.query.clauses import transform_bool
from elastic_to_typesense.query.clauses.bool_query import SKIPPED_NEGATED_RANGE, UNPARSABLE_MUST_NOT
from elastic_to_typesense.query.dispatcher import transform_clauses
from elastic_to_typesense.query.filter_expression import render_filter


@pytest.fixture
def ctx():
    return TransformContext()


def term(field, value):
    return {"term": {field: value}}


def test_must_clauses_are_and_combined(ctx):
    result = transform_bool(
        {"must": [term("field1", "value1"), term("field2", "value2")]}, ctx
    )
    assert result.filter.render() == '(field1:= "value1") && (field2:= "value2")'


def test_should_clauses_are_or_combined(ctx):
    result = transform_bool(
        {"should": [term("field1", "value1"), term("field2", "value2")]}, ctx
    )
    assert result.filter.render() == '(field1:= "value1") || (field2:= "value2")'


def test_filter_clauses_are_and_combined(ctx):
    result = transform_bool({"filter": [term("a", 1), {"range": {"b": {"lte": 3}}}]}, ctx)
    assert render_filter(result.filter) == "(a:= 1) && (b:<= 3)"


def test_single_object_groups_are_accepted(ctx):
    result = transform_bool({"must": term("a", 1)}, ctx)
    assert render_filter(result.filter) == "a:= 1"


def test_must_not_same_field(ctx):
    result = transform_bool(
        {"must_not": [term("field", "value1"), term("field", "value2")]}, ctx
    )
    assert render_filter(result.filter) == 'field:!= "value1" && field:!= "value2"'
    assert result.warnings == []


def test_groups_are_parenthesized_and_ordered(ctx):
    result = transform_bool(
        {
            "must_not": [term("field3", "value3")],
            "should": [term("field2", "value2")],
            "must": [term("field1", "value1")],
        },
        ctx,
    )
    assert render_filter(result.filter) == (
        '((field1:= "value1")) && ((field2:= "value2")) && (field3:!= "value3")'
    )


def test_must_not_strict_greater_than_drops_the_group(ctx):
    result = transform_bool({"must_not": [{"range": {"price": {"gt": 100}}}]}, ctx)
    assert result.filter is None
    assert result.warnings == [SKIPPED_NEGATED_RANGE]
    assert SKIPPED_NEGATED_RANGE == "Skipped must_not clause with unsupported negated range filter"


def test_dropped_must_not_group_keeps_other_groups(ctx):
    result = transform_bool(
        {"must": [term("a", 1)], "must_not": [{"range": {"price": {"gt": 100}}}]}, ctx
    )
    assert render_filter(result.filter) == "a:= 1"
    assert result.warnings == [SKIPPED_NEGATED_RANGE]


@pytest.mark.parametrize(
    "op,expected",
    [("lt", "price:>= 10"), ("lte", "price:> 10"), ("gte", "price:< 10")],
)
def test_must_not_range_operators(ctx, op, expected):
    result = transform_bool({"must_not": [{"range": {"price": {op: 10}}}]}, ctx)
    assert render_filter(result.filter) == expected


def test_must_not_terms(ctx):
    result = transform_bool({"must_not": [{"terms": {"status": ["a", "b"]}}]}, ctx)
    assert render_filter(result.filter) == 'status:!= ["a","b"]'


def test_must_not_exists_cannot_be_negated(ctx):
    result = transform_bool({"must_not": [{"exists": {"field": "email"}}]}, ctx)
    assert result.filter is None
    assert result.warnings == [
        "Unsupported negation format: email:!= null",
        UNPARSABLE_MUST_NOT,
    ]


def test_must_not_geo_distance_cannot_be_negated(ctx):
    result = transform_bool(
        {
            "must_not": [
                {"geo_distance": {"distance": "1km", "loc": {"lat": 1, "lon": 2}}},
                term("a", 1),
            ]
        },
        ctx,
    )
    assert render_filter(result.filter) == "a:!= 1"
    assert result.warnings == ["Unsupported negation format: loc:(1, 2, 1 km)"]


def test_unsupported_negation_reports_the_whole_clause(ctx):
    result = transform_bool(
        {
            "must_not": [
                {"bool": {"must": [term("a", 1), {"exists": {"field": "b"}}]}},
                term("c", 3),
            ]
        },
        ctx,
    )
    assert render_filter(result.filter) == "c:!= 3"
    assert result.warnings == [
        "Unsupported negation format: (a:= 1) && (b:!= null)"
    ]


def test_must_not_nested_must_uses_de_morgan(ctx):
    result = transform_bool(
        {"must_not": [{"bool": {"must": [term("a", 1), term("b", 2)]}}]}, ctx
    )
    assert render_filter(result.filter) == "a:!= 1 || b:!= 2"


def test_must_not_nested_should_uses_de_morgan(ctx):
    result = transform_bool(
        {"must_not": [{"bool": {"should": [term("a", 1), term("b", 2)]}}]}, ctx
    )
    assert render_filter(result.filter) == "a:!= 1 && b:!= 2"


def test_must_not_duplicates_are_removed(ctx):
    result = transform_bool({"must_not": [term("a", 1), term("a", 1)]}, ctx)
    assert render_filter(result.filter) == "a:!= 1"


def test_empty_bool(ctx):
    result = transform_bool({}, ctx)
    assert result.filter is None
    assert result.warnings == []
    assert transform_bool({"must": []}, ctx).filter is None


def test_unknown_bool_options_and_minimum_should_match(ctx):
    result = transform_bool(
        {"should": [term("a", 1)], "minimum_should_match": 2, "adjust_pure_negative": True},
        ctx,
    )
    assert result.warnings == [
        'Unsupported bool option: "adjust_pure_negative"',
        'minimum_should_match "2" is not supported; should clauses are OR-combined',
    ]
    assert transform_bool({"should": [term("a", 1)], "minimum_should_match": 1}, ctx).warnings == []


def test_or_group_keeps_precedence_next_to_sibling_clause(ctx):
    result = transform_clauses(
        {"bool": {"should": [term("a", 1), term("b", 2)]}, "term": {"c": 3}}, ctx
    )
    assert render_filter(result.filter) == "((a:= 1) || (b:= 2)) && c:= 3"


def test_nested_bool_params_and_warnings_propagate(ctx):
    result = transform_bool(
        {
            "must": [
                {"multi_match": {"query": "phone", "fields": ["title"]}},
                {"foo": {}},
            ]
        },
        ctx,
    )
    assert result.filter is None
    assert result.params == {"q": "phone", "query_by": "title"}
    assert result.warnings == ['Unsupported clause: "foo"']


def test_negated_context_leaves_original_untouched(ctx):
    negated = ctx.negate()
    assert negated.negated is True
    assert ctx.negated is False
