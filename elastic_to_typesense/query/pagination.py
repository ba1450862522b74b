"""
Pagination and sort translation.

``from``/``size`` become ``page``/``per_page``; the ``sort`` list becomes a
comma-separated ``sort_by`` expression.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.query.formatter import format_number
from elastic_to_typesense.query.results import ClauseResult
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field

TEXT_MATCH_FIELD = "_text_match"
SORT_ORDERS = ("asc", "desc")
GEO_SORT_OPTIONS = {"order", "unit", "mode", "distance_type", "ignore_unmapped"}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def transform_geo_sort(
    options: Mapping[str, Any], ctx: TransformContext
) -> Tuple[Optional[str], List[str]]:
    """
    Transform an Elasticsearch ``_geo_distance`` sort.

    Args:
        options: ``{"location": {"lat": .., "lon": ..}, "order": "asc"}``
        ctx: Transform context

    Returns:
        ``field(lat,lon):order`` (or None) and warnings
    """
    warnings: List[str] = []
    entries = [
        (key, value)
        for key, value in options.items()
        if key not in GEO_SORT_OPTIONS and isinstance(value, Mapping)
    ]
    if len(entries) != 1:
        warnings.append("Invalid geo_distance sort: expected exactly one field with coordinates")
        return None, warnings

    field, coordinates = entries[0]
    lat, lon = coordinates.get("lat"), coordinates.get("lon")
    if not all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in (lat, lon)):
        warnings.append(f"Invalid geo_distance coordinates for field '{field}'")
        return None, warnings

    order = options.get("order", "asc")
    if order not in SORT_ORDERS:
        warnings.append(f"Invalid sort order: {order}. Using 'asc' instead.")
        order = "asc"

    mapped = resolve_mapped_field(field, ctx)
    if mapped is None:
        warnings.append(f"Unmapped geo field: {field}")
        return None, warnings

    return f"{mapped}({format_number(lat)},{format_number(lon)}):{order}", warnings


def _sort_entry(entry: Any) -> Tuple[Optional[str], Any]:
    # "field" | {"field": "desc"} | {"field": {"order": "desc"}}
    if isinstance(entry, str):
        return entry, {}
    if isinstance(entry, Mapping) and len(entry) == 1:
        field, options = next(iter(entry.items()))
        if isinstance(options, str):
            options = {"order": options}
        return field, options if isinstance(options, Mapping) else {}
    return None, None


def _transform_sort(sort: Any, ctx: TransformContext, warnings: List[str]) -> Optional[str]:
    entries = [sort] if isinstance(sort, (str, Mapping)) else sort
    if not isinstance(entries, (list, tuple)):
        warnings.append("Sort must be a list")
        return None

    parts: List[str] = []
    for entry in entries:
        field, options = _sort_entry(entry)
        if field is None:
            warnings.append(f"Invalid sort entry: {entry!r}")
            continue

        if field == "_geo_distance":
            geo_sort, geo_warnings = transform_geo_sort(options, ctx)
            warnings.extend(geo_warnings)
            if geo_sort:
                parts.append(geo_sort)
            continue

        if field == "_score":
            order = options.get("order", "desc")
            if order not in SORT_ORDERS:
                warnings.append(f"Invalid sort order: {order}. Using 'desc' instead.")
                order = "desc"
            parts.append(ctx.default_score_field or f"{TEXT_MATCH_FIELD}:{order}")
            continue

        mapped = resolve_mapped_field(field, ctx)
        if mapped is None:
            warnings.append(f'Skipped unmapped sort field "{field}"')
            continue

        order = options.get("order", "asc")
        if order not in SORT_ORDERS:
            warnings.append(f"Invalid sort order: {order}. Using 'asc' instead.")
            order = "asc"
        parts.append(f"{mapped}:{order}")

    return ",".join(parts) or None


def create_pagination_and_sort(
    request: Mapping[str, Any], ctx: TransformContext
) -> ClauseResult:
    """
    Translate ``from``, ``size`` and ``sort`` of an Elasticsearch request.

    Returns:
        ``per_page``, ``page`` and ``sort_by`` parameters with warnings
    """
    warnings: List[str] = []
    params: Dict[str, Any] = {}

    offset = request.get("from")
    size = request.get("size")

    if _is_int(size):
        params["per_page"] = size
    if _is_int(offset) and _is_int(size) and size > 0:
        params["page"] = offset // size + 1
        if offset % size:
            warnings.append(
                f'"from" ({offset}) is not a multiple of "size" ({size}); '
                f"page {params['page']} starts at offset {(params['page'] - 1) * size}"
            )
    elif offset is not None and offset != 0 and not _is_int(size):
        warnings.append('"from" without a numeric "size" cannot be translated to a page')

    if request.get("sort") is not None:
        sort_by = _transform_sort(request["sort"], ctx, warnings)
        if sort_by:
            params["sort_by"] = sort_by

    return ClauseResult(params=params, warnings=warnings)
