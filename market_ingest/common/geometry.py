"""Geographic point construction from raw latitude/longitude cells."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError

from market_ingest.common.constants import WGS84_EPSG
from market_ingest.common.errors import ConfigError, MalformedNumericError


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def to_geojson(self) -> dict[str, Any]:
        # Stored documents keep (latitude, longitude) order.
        return {"type": "Point", "coordinates": [self.latitude, self.longitude]}


def _parse_coordinate(field_name: str, value: str) -> float:
    # float() also takes "nan", "inf" and "1_000"; none of those is a coordinate.
    if "_" in value:
        raise MalformedNumericError(field_name, value)
    try:
        parsed = float(value)
    except ValueError as exc:
        raise MalformedNumericError(field_name, value) from exc
    if not math.isfinite(parsed):
        raise MalformedNumericError(field_name, value)
    return parsed


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_epsg(source_epsg: int) -> int:
    try:
        CRS.from_epsg(int(source_epsg))
    except (CRSError, TypeError, ValueError) as exc:
        raise ConfigError(f"Unknown source CRS: EPSG:{source_epsg}") from exc
    return int(source_epsg)


@lru_cache(maxsize=8)
def _transformer_to_wgs84(source_epsg: int) -> Transformer:
    return Transformer.from_crs(CRS.from_epsg(source_epsg), CRS.from_epsg(WGS84_EPSG), always_xy=True)


def _transform_to_wgs84(lat: float, lon: float, source_epsg: int) -> tuple[float, float]:
    if source_epsg == WGS84_EPSG:
        return lat, lon
    transformed_lon, transformed_lat = _transformer_to_wgs84(source_epsg).transform(lon, lat)
    return transformed_lat, transformed_lon


def build_geo_point(
    lat: str | None,
    lon: str | None,
    *,
    source_epsg: int = WGS84_EPSG,
) -> GeoPoint | None:
    """Build a WGS84 point, or ``None`` when either coordinate is absent.

    No range check is applied. Text that is present but not numeric raises
    ``MalformedNumericError``.
    """
    if _is_blank(lat) or _is_blank(lon):
        return None
    latitude = _parse_coordinate("latitude", lat)
    longitude = _parse_coordinate("longitude", lon)
    latitude, longitude = _transform_to_wgs84(latitude, longitude, source_epsg)
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise MalformedNumericError("latitude/longitude", f"{lat},{lon}")
    return GeoPoint(latitude=latitude, longitude=longitude)
