"""Build normalised household records from a header line and one CSV row."""

from __future__ import annotations

from typing import Sequence

from market_ingest.common import constants as c
from market_ingest.common.constants import WGS84_EPSG
from market_ingest.common.geometry import build_geo_point
from market_ingest.common.header import extract_field, resolve_header
from market_ingest.common.ids import IdentityDigest, generate_record_id
from market_ingest.common.models import HouseholdRecord


def _strip(value: str | None) -> str | None:
    return value.strip() if value is not None else None


def build_record(
    header: str,
    row: Sequence[str],
    *,
    digest: IdentityDigest = IdentityDigest.SHA256,
    source_epsg: int = WGS84_EPSG,
) -> HouseholdRecord:
    """Construct one record; columns may appear in any order.

    Raises a ``RecordError`` subclass when the row cannot be used. Columns
    missing from the header simply leave their field as ``None``.
    """
    column_index = resolve_header(header)

    def field(name: str) -> str | None:
        return extract_field(column_index, name, row)

    address = _strip(field(c.COLUMN_ADDRESS))
    city = _strip(field(c.COLUMN_CITY))
    state = _strip(field(c.COLUMN_STATE))
    record_id = generate_record_id(address, city, state, digest=digest)

    latitude = field(c.COLUMN_LATITUDE)
    longitude = field(c.COLUMN_LONGITUDE)

    return HouseholdRecord(
        record_id=record_id,
        address=address,
        city=city,
        state=state,
        location=build_geo_point(latitude, longitude, source_epsg=source_epsg),
        first_name=field(c.COLUMN_FIRST_NAME),
        last_name=field(c.COLUMN_LAST_NAME),
        phone=field(c.COLUMN_PHONE),
        zip_code=field(c.COLUMN_ZIP),
        county=field(c.COLUMN_COUNTY),
        metro_area=field(c.COLUMN_METRO_AREA),
        latitude=latitude,
        longitude=longitude,
        age_range=field(c.COLUMN_AGE_RANGE),
        gender=field(c.COLUMN_GENDER),
        own_rent=field(c.COLUMN_OWN_RENT),
        household_income=field(c.COLUMN_HOUSEHOLD_INCOME),
        home_value=field(c.COLUMN_HOME_VALUE),
        wealth=field(c.COLUMN_WEALTH),
        fips=field(c.COLUMN_FIPS),
    )
