"""Result mapping components."""

from elastic_to_typesense.execution.result_mapper import ResultMapper, create_default_mapper

__all__ = ["ResultMapper", "create_default_mapper"]
