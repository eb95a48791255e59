"""Ingestion report and run summary aggregation."""

from __future__ import annotations

from pathlib import Path

from market_ingest.common.fs import read_json, write_json


def write_ingest_report(data_dir: Path, report_filename: str, report: dict) -> Path:
    report_path = data_dir / "out" / "reports" / report_filename
    write_json(report_path, report)
    return report_path


def write_run_summary(
    data_dir: Path,
    run_id: str,
    run_date: str,
    stages: list[str],
    report_filename: str,
    stage_failures: list[str] | None = None,
) -> Path:
    stage_failures = stage_failures or []
    totals = {
        "rows_in": 0,
        "records_out": 0,
        "failed_rows": 0,
    }

    report_path = data_dir / "out" / "reports" / report_filename
    report_present = report_path.exists()
    if report_present:
        counts = read_json(report_path).get("counts", {})
        for key in totals:
            totals[key] = int(counts.get(key, 0))

    status = "success"
    if stage_failures or ("ingest" in stages and not report_present):
        status = "error"
    elif totals["failed_rows"] > 0:
        status = "partial"

    summary_path = data_dir / "out" / "reports" / "run_summary.json"
    payload = {
        "run_id": run_id,
        "run_date": run_date,
        "status": status,
        "stages": stages,
        "stage_failures": stage_failures,
        "totals": totals,
    }
    write_json(summary_path, payload)
    return summary_path
