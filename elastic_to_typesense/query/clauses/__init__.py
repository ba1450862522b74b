"""Per-clause transformers from Elasticsearch clauses to Typesense parameters."""

from elastic_to_typesense.query.clauses.bool_query import transform_bool
from elastic_to_typesense.query.clauses.exists import transform_exists
from elastic_to_typesense.query.clauses.function_score import transform_function_score
from elastic_to_typesense.query.clauses.geo_distance import transform_geo_distance
from elastic_to_typesense.query.clauses.match import transform_match, transform_match_all
from elastic_to_typesense.query.clauses.multi_match import transform_multi_match
from elastic_to_typesense.query.clauses.prefix import transform_prefix
from elastic_to_typesense.query.clauses.range import transform_range
from elastic_to_typesense.query.clauses.term import transform_term
from elastic_to_typesense.query.clauses.terms import transform_terms

__all__ = [
    "transform_bool",
    "transform_exists",
    "transform_function_score",
    "transform_geo_distance",
    "transform_match",
    "transform_match_all",
    "transform_multi_match",
    "transform_prefix",
    "transform_range",
    "transform_term",
    "transform_terms",
]
