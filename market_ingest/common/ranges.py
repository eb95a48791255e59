"""Ordered substring decode tables for Data Axle categorical ranges.

Each table is evaluated top to bottom and the first trigger found inside the
raw value wins. Triggers overlap on purpose, so the order is part of the
contract. Output values approximate the midpoint of each bucket.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RangeDecoder:
    name: str
    rules: tuple[tuple[str, int], ...]

    def decode(self, raw: str | None) -> int | None:
        if not raw:
            return None
        for trigger, value in self.rules:
            if trigger in raw:
                return value
        return None

    def is_unrecognized(self, raw: str | None) -> bool:
        return bool(raw) and self.decode(raw) is None


INCOME_DECODER = RangeDecoder(
    name="household_income",
    rules=(
        ("Under", 10_000),
        ("20,000", 25_000),
        ("30,000", 35_000),
        ("40,000", 45_000),
        ("50,000", 55_000),
        ("60,000", 65_000),
        ("70,000", 75_000),
        ("80,000", 85_000),
        ("90,000", 95_000),
        ("100,000", 112_500),
        ("125,000", 137_500),
        ("150,000", 162_500),
        ("200,000", 225_000),
        ("250,000", 275_000),
        ("300,000", 350_000),
        ("400,000", 450_000),
        ("500,000", 500_000),
    ),
)

HOME_VALUE_DECODER = RangeDecoder(
    name="home_value",
    rules=(
        ("$24,999", 12_500),
        ("$25,000", 37_500),
        ("$50,000", 62_500),
        ("$75,000", 87_500),
        ("$100,000", 112_500),
        ("$125,000", 137_500),
        ("$150,000", 162_500),
        ("$175,000", 187_500),
        ("$200,000", 225_000),
        ("$250,000", 275_000),
        ("$300,000", 325_000),
        ("$350,000", 375_000),
        ("$400,000", 425_000),
        ("$450,000", 475_000),
        ("$500,000", 550_000),
        ("$600,000", 650_000),
        ("$700,000", 750_000),
        ("$800,000", 850_000),
        ("$900,000", 950_000),
        ("$1,000,000", 1_000_000),
    ),
)

WEALTH_DECODER = RangeDecoder(
    name="wealth",
    rules=(
        ("$549", 250),
        ("$550", 2_500),
        ("$5,700", 12_500),
        ("$20,703", 40_000),
        ("$51,303", 60_000),
        ("$71,501", 85_000),
        ("$97,300", 112_500),
        ("$126,800", 150_000),
        ("$173,850", 200_000),
        ("$220,900", 260_000),
        ("$295,000", 330_000),
        ("$369,100", 450_000),
        ("$554,050", 650_000),
        ("$739,000", 950_000),
        ("$1,186,300", 1_900_000),
        ("$2,743,733", 3_000_000),
        ("$3,218,667", 3_500_000),
        ("$3,693,600", 6_100_000),
        ("$8,693,520", 10_500_000),
        ("$13,693,440", 15_000_000),
    ),
)

AGE_DECODER = RangeDecoder(
    name="age_range",
    rules=(
        ("18", 21),
        ("25", 27),
        ("30", 32),
        ("35", 37),
        ("40", 42),
        ("45", 47),
        ("50", 52),
        ("55", 57),
        ("60", 62),
        ("69", 67),
        ("65+", 70),
        ("70", 72),
        ("75+", 80),
    ),
)

# 1 = owns, 0 = rents. Fragments are deliberately loose: "Confirmed",
# "Own"/"Owner"/"Owns"/"Homeowner" and "Rent"/"Renter" all land in a bucket.
# A bare "wn" or "own" would also catch "Unknown".
TENURE_DECODER = RangeDecoder(
    name="own_rent",
    rules=(
        ("firm", 1),
        ("wns", 1),
        ("wner", 1),
        ("Own", 1),
        ("ent", 0),
    ),
)

DECODERS = (
    INCOME_DECODER,
    HOME_VALUE_DECODER,
    WEALTH_DECODER,
    AGE_DECODER,
    TENURE_DECODER,
)
