"""CSV ingestion stage: one record per data row, failures skipped and reported."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from market_ingest.common.config_loader import IngestConfig
from market_ingest.common.constants import KNOWN_COLUMNS, MAX_FAILURE_SAMPLES
from market_ingest.common.errors import RecordError, StageError
from market_ingest.common.fs import decode_line, iter_raw_lines
from market_ingest.common.header import duplicate_columns, missing_columns, resolve_header, split_row
from market_ingest.common.logging import log_event, log_warning
from market_ingest.common.models import HouseholdRecord
from market_ingest.common.ranges import DECODERS
from market_ingest.pipeline.export import upsert_documents
from market_ingest.pipeline.records import build_record
from market_ingest.pipeline.reports import write_ingest_report


def _count_unrecognized(records: list[HouseholdRecord]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for decoder in DECODERS:
        counts[decoder.name] = sum(
            1 for record in records if decoder.is_unrecognized(getattr(record, decoder.name))
        )
    return counts


def run_ingest(
    input_path: Path,
    config: IngestConfig,
    data_dir: Path,
    run_id: str,
    logger: logging.Logger,
    *,
    strict: bool = False,
) -> dict:
    if not input_path.exists():
        raise StageError(f"Missing CSV input: {input_path}")

    lines = iter_raw_lines(input_path)
    try:
        header_number, raw_header = next(lines)
    except StopIteration:
        raise StageError(f"CSV input has no header line: {input_path}") from None
    try:
        header = decode_line(raw_header, header_number, config.encoding).rstrip("\r\n")
    except RecordError as exc:
        raise StageError(f"Unreadable CSV header in {input_path}: {exc}") from exc

    column_index = resolve_header(header)
    dupes = duplicate_columns(header)
    if dupes:
        log_warning(
            logger,
            f"duplicate header columns, last occurrence used: {', '.join(dupes)}",
            run_id=run_id,
            stage="ingest",
            source=str(input_path),
            event="HEADER_DUPLICATE_COLUMNS",
            status="warning",
        )

    records: list[HouseholdRecord] = []
    failures: list[dict] = []
    failure_counts: Counter[str] = Counter()
    rows_in = 0

    for line_number, raw_line in lines:
        rows_in += 1
        try:
            record = build_record(
                header,
                split_row(decode_line(raw_line, line_number, config.encoding)),
                digest=config.digest,
                source_epsg=config.source_epsg,
            )
        except RecordError as exc:
            failure_counts[exc.error_code] += 1
            log_warning(
                logger,
                str(exc),
                run_id=run_id,
                stage="ingest",
                source=str(input_path),
                event="ROW_FAIL",
                status="error",
                row_number=line_number,
                error_code=exc.error_code,
            )
            if strict:
                raise StageError(f"Row {line_number} failed: {exc}") from exc
            if len(failures) < MAX_FAILURE_SAMPLES:
                failures.append({"row_number": line_number, "error_code": exc.error_code, "message": str(exc)})
            continue
        records.append(record)

    records_path = data_dir / "out" / config.records_filename
    export_stats = upsert_documents(records_path, records)
    log_event(
        logger,
        f"wrote {len(records)} records to {records_path}",
        run_id=run_id,
        stage="ingest",
        source=str(input_path),
        event="EXPORT_WRITTEN",
        status="ok",
        rows_in=rows_in,
        rows_out=len(records),
    )

    id_counts = Counter(record.record_id for record in records)
    with_location = sum(1 for record in records if record.location is not None)
    report = {
        "run_id": run_id,
        "input": str(input_path),
        "counts": {
            "rows_in": rows_in,
            "records_out": len(records),
            "failed_rows": sum(failure_counts.values()),
            "with_location": with_location,
            "without_location": len(records) - with_location,
            "duplicate_ids": sum(count - 1 for count in id_counts.values() if count > 1),
        },
        "export": export_stats,
        "missing_columns": missing_columns(column_index, KNOWN_COLUMNS),
        "duplicate_header_columns": dupes,
        "unrecognized_categories": _count_unrecognized(records),
        "failures_by_code": dict(sorted(failure_counts.items())),
        "failures": failures,
    }
    write_ingest_report(data_dir, config.report_filename, report)
    return report
