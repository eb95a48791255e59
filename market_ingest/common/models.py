"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Iterable

from market_ingest.common.geometry import GeoPoint
from market_ingest.common.ranges import (
    AGE_DECODER,
    HOME_VALUE_DECODER,
    INCOME_DECODER,
    TENURE_DECODER,
    WEALTH_DECODER,
)

IDENTITY_FIELDS = ("record_id", "address", "city", "state")


@dataclass(frozen=True)
class HouseholdRecord:
    record_id: str
    address: str
    city: str
    state: str
    location: GeoPoint | None = None
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    zip_code: str | None = None
    county: str | None = None
    metro_area: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    age_range: str | None = None
    gender: str | None = None
    own_rent: str | None = None
    household_income: str | None = None
    home_value: str | None = None
    wealth: str | None = None
    fips: str | None = None
    competitors: tuple[str, ...] = ()

    def income_estimate(self) -> int | None:
        return INCOME_DECODER.decode(self.household_income)

    def home_value_estimate(self) -> int | None:
        return HOME_VALUE_DECODER.decode(self.home_value)

    def wealth_estimate(self) -> int | None:
        return WEALTH_DECODER.decode(self.wealth)

    def age_estimate(self) -> int | None:
        return AGE_DECODER.decode(self.age_range)

    def tenure_code(self) -> int | None:
        return TENURE_DECODER.decode(self.own_rent)

    def estimates(self) -> dict[str, int | None]:
        return {
            "income_estimate": self.income_estimate(),
            "home_value_estimate": self.home_value_estimate(),
            "wealth_estimate": self.wealth_estimate(),
            "age_estimate": self.age_estimate(),
            "tenure_code": self.tenure_code(),
        }

    def with_competitors(self, names: Iterable[str]) -> "HouseholdRecord":
        return replace(self, competitors=tuple(names))

    def with_updates(self, **changes: Any) -> "HouseholdRecord":
        locked = sorted(set(changes) & set(IDENTITY_FIELDS))
        if locked:
            # The id is derived from address/city/state; a new address is a new record.
            raise ValueError(f"identity fields cannot be updated: {', '.join(locked)}")
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_document(self) -> dict[str, Any]:
        document = self.to_dict()
        document["_id"] = document.pop("record_id")
        document["location"] = self.location.to_geojson() if self.location else None
        document["competitors"] = list(self.competitors)
        return document

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "HouseholdRecord":
        payload = dict(document)
        payload["record_id"] = payload.pop("_id")
        location = payload.get("location")
        if location:
            latitude, longitude = location["coordinates"]
            payload["location"] = GeoPoint(latitude=float(latitude), longitude=float(longitude))
        else:
            payload["location"] = None
        payload["competitors"] = tuple(payload.get("competitors") or ())
        return cls(**payload)

    def summary(self) -> str:
        return (
            f"HouseholdRecord {{ id='{self.record_id}', city='{self.city}', state='{self.state}', "
            f"age_range='{self.age_range}', household_income='{self.household_income}', "
            f"home_value='{self.home_value}', wealth='{self.wealth}' }}"
        )
