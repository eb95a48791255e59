import pytest

from market_ingest.common.errors import MalformedNumericError, MissingIdentityFieldError, RowTooShortError
from market_ingest.common.ids import generate_record_id
from market_ingest.pipeline.records import build_record

HEADER = "Address,City,State,Zip Code,Latitude,Longitude,Age Range,Own / Rent,Estimated Household Income"


def _row(**overrides):
    values = {
        "address": " 400 Oak Ave ",
        "city": "Brooklyn",
        "state": "NY",
        "zip": "11201",
        "lat": "40.7128",
        "lon": "-74.0060",
        "age": "65+",
        "tenure": "Definite Renter",
        "income": "Under $20K",
    }
    values.update(overrides)
    return [
        values["address"],
        values["city"],
        values["state"],
        values["zip"],
        values["lat"],
        values["lon"],
        values["age"],
        values["tenure"],
        values["income"],
    ]


def test_build_record_populates_fields_and_identity():
    record = build_record(HEADER, _row())

    assert record.address == "400 Oak Ave"
    assert record.city == "Brooklyn"
    assert record.state == "NY"
    assert record.record_id == generate_record_id("400 Oak Ave", "Brooklyn", "NY")
    assert record.zip_code == "11201"
    assert record.location.latitude == 40.7128
    assert record.location.longitude == -74.006
    assert record.latitude == "40.7128"
    assert record.age_estimate() == 70
    assert record.tenure_code() == 0
    assert record.income_estimate() == 10_000


def test_build_record_is_independent_of_column_order():
    plain = build_record("address,city,state", ["1 Main St", "Boston", "MA"])
    permuted = build_record("city,address,state", ["Boston", "1 Main St", "MA"])

    assert (permuted.address, permuted.city, permuted.state) == (plain.address, plain.city, plain.state)
    assert permuted.record_id == plain.record_id


def test_build_record_missing_optional_column_is_none():
    record = build_record("address,city,state,latitude", ["1 Main St", "Boston", "MA", "42.36"])

    assert record.zip_code is None
    assert record.wealth is None
    assert record.location is None
    assert record.wealth_estimate() is None


def test_build_record_missing_identity_column_raises():
    with pytest.raises(MissingIdentityFieldError):
        build_record("address,city", ["1 Main St", "Boston"])


def test_build_record_short_row_raises():
    with pytest.raises(RowTooShortError):
        build_record(HEADER, ["1 Main St", "Boston"])


def test_build_record_malformed_latitude_raises():
    with pytest.raises(MalformedNumericError):
        build_record(HEADER, _row(lat="north"))


def test_build_record_same_address_variants_share_identity():
    first = build_record(HEADER, _row(address="400 Oak Ave", city="Brooklyn"))
    second = build_record(HEADER, _row(address="400 OAK AVE  ", city=" brooklyn"))
    assert first.record_id == second.record_id
