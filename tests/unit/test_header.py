import pytest

from market_ingest.common.errors import RowTooShortError
from market_ingest.common.header import (
    duplicate_columns,
    extract_field,
    missing_columns,
    resolve_header,
    split_row,
)


def test_resolve_header_normalises_names_and_positions():
    index = resolve_header(" Address ,CITY,State,Zip Code")
    assert dict(index) == {"address": 0, "city": 1, "state": 2, "zip code": 3}


def test_resolve_header_blank_yields_empty_mapping():
    assert dict(resolve_header("")) == {}
    assert dict(resolve_header("   ")) == {}


def test_resolve_header_duplicate_names_last_occurrence_wins():
    index = resolve_header("city,address,City")
    assert index["city"] == 2
    assert duplicate_columns("city,address,City") == ["city"]
    assert duplicate_columns("city,address") == []


def test_resolve_header_is_read_only():
    index = resolve_header("address,city")
    with pytest.raises(TypeError):
        index["state"] = 5


def test_extract_field_returns_cell_without_trimming():
    index = resolve_header("address,city")
    assert extract_field(index, "city", ["1 Main St", " Boston "]) == " Boston "


def test_extract_field_missing_column_is_none():
    index = resolve_header("address,city")
    assert extract_field(index, "zip code", ["1 Main St", "Boston"]) is None


def test_extract_field_short_row_raises():
    index = resolve_header("address,city,state")
    with pytest.raises(RowTooShortError) as exc_info:
        extract_field(index, "state", ["1 Main St", "Boston"])
    assert exc_info.value.error_code == "ROW_TOO_SHORT"
    assert exc_info.value.index == 2


def test_missing_columns_preserves_expected_order():
    index = resolve_header("city,address")
    assert missing_columns(index, ["address", "state", "zip code"]) == ["state", "zip code"]


def test_split_row_keeps_empty_trailing_cells():
    assert split_row("a,,b,\r\n") == ["a", "", "b", ""]
