"""
Result of a single clause transformation.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from elastic_to_typesense.query.filter_expression import FilterNode

MATCH_ALL = "*"


class ClauseResult(BaseModel):
    """
    Partial Typesense query produced by one clause transformer.

    ``filter`` is the clause's filter fragment (if any); ``params`` carries
    search parameters such as ``q``, ``query_by`` or ``num_typos``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    filter: Optional[FilterNode] = None
    params: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)

    @classmethod
    def empty(cls, *warnings: str) -> "ClauseResult":
        return cls(warnings=list(warnings))


def merge_params(target: Dict[str, Any], params: Dict[str, Any]) -> None:
    """
    Merge search parameters into ``target``.

    The first value seen for a key wins; a match-all search text never
    overrides anything.
    """
    for key, value in params.items():
        if key == "q" and value == MATCH_ALL:
            continue
        target.setdefault(key, value)
