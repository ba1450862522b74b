"""
``geo_distance`` clause: ``field:(lat, lon, radius km)``.
"""

import re
from typing import Any, List, Mapping, Optional, Tuple

from elastic_to_typesense.core.context import TransformContext
from elastic_to_typesense.query.filter_expression import GeoRadius
from elastic_to_typesense.query.results import ClauseResult
from elastic_to_typesense.query.values import apply_value_transformer
from elastic_to_typesense.schema.field_resolver import resolve_mapped_field

# Kilometres per unit; a distance without unit is read as kilometres
DISTANCE_UNITS = {
    "": 1.0,
    "km": 1.0,
    "m": 0.001,
    "cm": 0.00001,
    "mm": 0.000001,
    "mi": 1.609344,
    "yd": 0.0009144,
    "ft": 0.0003048,
    "in": 0.0000254,
    "nmi": 1.852,
}

GEO_OPTIONS = {
    "distance",
    "distance_type",
    "validation_method",
    "ignore_unmapped",
    "boost",
    "_name",
}

_DISTANCE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$")


def convert_distance_to_km(distance: Any) -> Optional[float]:
    """
    Convert an Elasticsearch distance (``"10km"``, ``"500m"``, ``5``) to km.

    Returns:
        Distance in kilometres, or None for unparsable values or units
    """
    if isinstance(distance, bool):
        return None
    if isinstance(distance, (int, float)):
        return float(distance)
    if not isinstance(distance, str):
        return None

    match = _DISTANCE_RE.match(distance)
    if match is None:
        return None
    factor = DISTANCE_UNITS.get(match.group(2).lower())
    if factor is None:
        return None
    return round(float(match.group(1)) * factor, 6)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_geo_point(point: Any) -> Optional[Tuple[Any, Any]]:
    """
    Read a geo point as ``(lat, lon)``.

    Accepts ``{"lat": .., "lon": ..}``, ``[lon, lat]`` and ``"lat,lon"``.
    """
    if isinstance(point, Mapping):
        lat, lon = point.get("lat"), point.get("lon")
    elif isinstance(point, (list, tuple)) and len(point) == 2:
        lon, lat = point
    elif isinstance(point, str) and point.count(",") == 1:
        lat_text, lon_text = point.split(",")
        try:
            lat, lon = float(lat_text), float(lon_text)
        except ValueError:
            return None
    else:
        return None

    if not (_is_number(lat) and _is_number(lon)):
        return None
    return lat, lon


def transform_geo_distance(geo: Mapping[str, Any], ctx: TransformContext) -> ClauseResult:
    """
    Transform an Elasticsearch ``geo_distance`` clause into a radius filter.

    The value transformer, when configured, is applied to latitude and
    longitude separately under ``<field>.lat`` and ``<field>.lon``.
    """
    warnings: List[str] = []

    fields = [key for key in geo if key not in GEO_OPTIONS]
    if not fields:
        return ClauseResult.empty("Invalid geo_distance query: missing geo field")
    if len(fields) > 1:
        ignored = ", ".join(f'"{f}"' for f in fields[1:])
        warnings.append(f"geo_distance supports a single geo field; ignored {ignored}")
    field = fields[0]

    radius_km = convert_distance_to_km(geo.get("distance"))
    if radius_km is None:
        return ClauseResult.empty(
            *warnings, f'Invalid geo_distance distance: {geo.get("distance")!r}'
        )

    mapped = resolve_mapped_field(field, ctx)
    if mapped is None:
        return ClauseResult.empty(*warnings, f'Skipped unmapped field "{field}" in geo_distance')

    point = parse_geo_point(geo[field])
    if point is None:
        return ClauseResult.empty(*warnings, f'Invalid geo point for field "{field}"')

    lat = apply_value_transformer(f"{field}.lat", f"{mapped}.lat", point[0], ctx)
    lon = apply_value_transformer(f"{field}.lon", f"{mapped}.lon", point[1], ctx)
    if not (_is_number(lat) and _is_number(lon)):
        return ClauseResult.empty(*warnings, f'Invalid geo point for field "{field}"')

    return ClauseResult(
        filter=GeoRadius(field=mapped, latitude=lat, longitude=lon, radius_km=radius_km),
        warnings=warnings,
    )
