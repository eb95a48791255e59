import pytest
from pyproj import Transformer

from market_ingest.common.errors import ConfigError, MalformedNumericError
from market_ingest.common.geometry import GeoPoint, build_geo_point, validate_epsg


def test_build_geo_point_keeps_latitude_longitude_order():
    point = build_geo_point("40.7128", "-74.0060")
    assert point == GeoPoint(latitude=40.7128, longitude=-74.006)


def test_build_geo_point_absent_when_either_missing():
    assert build_geo_point(None, "-74.0060") is None
    assert build_geo_point("40.7128", None) is None
    assert build_geo_point("", "-74.0060") is None
    assert build_geo_point("40.7128", "  ") is None


def test_build_geo_point_no_range_validation():
    point = build_geo_point("123.5", "-400")
    assert point.latitude == 123.5
    assert point.longitude == -400.0


def test_build_geo_point_malformed_raises():
    with pytest.raises(MalformedNumericError) as exc_info:
        build_geo_point("abc", "-74.0060")
    assert exc_info.value.field_name == "latitude"
    assert exc_info.value.error_code == "MALFORMED_NUMERIC"


@pytest.mark.parametrize("raw", ["nan", "inf", "-Infinity", "1_000"])
def test_build_geo_point_rejects_non_finite_and_underscored_text(raw):
    with pytest.raises(MalformedNumericError):
        build_geo_point(raw, "-74.0060")
    with pytest.raises(MalformedNumericError):
        build_geo_point("40.7128", raw)


def test_build_geo_point_reprojects_to_wgs84():
    transformer = Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True)
    x, y = transformer.transform(-74.006, 40.7128)

    point = build_geo_point(str(y), str(x), source_epsg=3857)

    assert abs(point.latitude - 40.7128) < 1e-6
    assert abs(point.longitude - (-74.006)) < 1e-6


def test_geojson_keeps_stored_order():
    assert GeoPoint(latitude=1.5, longitude=2.5).to_geojson() == {"type": "Point", "coordinates": [1.5, 2.5]}


def test_validate_epsg_rejects_unknown_code():
    assert validate_epsg(4326) == 4326
    with pytest.raises(ConfigError):
        validate_epsg(999999)
