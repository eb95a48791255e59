"""Decoded range estimates for analytics consumers."""

from __future__ import annotations

from pathlib import Path

from market_ingest.common.config_loader import IngestConfig
from market_ingest.common.errors import StageError
from market_ingest.common.fs import write_csv
from market_ingest.common.models import HouseholdRecord
from market_ingest.pipeline.export import load_records

ESTIMATE_HEADERS = [
    "record_id",
    "city",
    "state",
    "zip_code",
    "latitude",
    "longitude",
    "income_estimate",
    "home_value_estimate",
    "wealth_estimate",
    "age_estimate",
    "tenure_code",
]


def _estimate_row(record: HouseholdRecord) -> dict[str, object]:
    row: dict[str, object] = {
        "record_id": record.record_id,
        "city": record.city,
        "state": record.state,
        "zip_code": record.zip_code or "",
        "latitude": record.location.latitude if record.location else "",
        "longitude": record.location.longitude if record.location else "",
    }
    for key, value in record.estimates().items():
        row[key] = "" if value is None else value
    return row


def run_estimates(config: IngestConfig, data_dir: Path) -> Path:
    records_path = data_dir / "out" / config.records_filename
    if not records_path.exists():
        raise StageError(f"Missing records export: {records_path}")

    records = load_records(records_path)
    out_path = data_dir / "out" / config.estimates_filename
    write_csv(out_path, ESTIMATE_HEADERS, (_estimate_row(record) for record in records))
    return out_path
