import pytest

from market_ingest.common.ranges import (
    AGE_DECODER,
    HOME_VALUE_DECODER,
    INCOME_DECODER,
    TENURE_DECODER,
    WEALTH_DECODER,
    RangeDecoder,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Under $20,000", 10_000),
        ("$20,000 to $29,999", 25_000),
        ("$100,000 to $124,999", 112_500),
        ("$125,000 to $149,999", 137_500),
        ("$500,000 or More", 500_000),
        ("Unknown", None),
    ],
)
def test_income_decoder(raw, expected):
    assert INCOME_DECODER.decode(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("$1 to $24,999", 12_500),
        ("$25,000 to $49,999", 37_500),
        ("$500,000 to $599,999", 550_000),
        ("$1,000,000 or More", 1_000_000),
    ],
)
def test_home_value_decoder(raw, expected):
    assert HOME_VALUE_DECODER.decode(raw) == expected


def test_wealth_decoder():
    assert WEALTH_DECODER.decode("$0 - $549") == 250
    assert WEALTH_DECODER.decode("$550 - $5,699") == 2_500
    assert WEALTH_DECODER.decode("$13,693,440 or More") == 15_000_000
    assert WEALTH_DECODER.decode("") is None
    assert WEALTH_DECODER.decode(None) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("18-24", 21),
        ("35-39", 37),
        ("65-69", 67),
        ("65+", 70),
        ("70-74", 72),
        ("75+", 80),
        ("Unknown", None),
    ],
)
def test_age_decoder(raw, expected):
    assert AGE_DECODER.decode(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Rent", 0),
        ("Definite Renter", 0),
        ("Own", 1),
        ("Definite Owner", 1),
        ("Probable Homeowner", 1),
        ("Confirmed", 1),
        ("Unknown", None),
    ],
)
def test_tenure_decoder(raw, expected):
    assert TENURE_DECODER.decode(raw) == expected


def test_first_matching_trigger_wins():
    decoder = RangeDecoder(name="demo", rules=(("ab", 1), ("abc", 2)))
    assert decoder.decode("abc") == 1
    reordered = RangeDecoder(name="demo", rules=(("abc", 2), ("ab", 1)))
    assert reordered.decode("abc") == 2


def test_is_unrecognized_only_for_non_empty_values():
    assert AGE_DECODER.is_unrecognized("Unknown") is True
    assert AGE_DECODER.is_unrecognized("") is False
    assert AGE_DECODER.is_unrecognized(None) is False
    assert AGE_DECODER.is_unrecognized("65+") is False
