"""CLI entrypoint for the household CSV ingestion pipeline."""

from __future__ import annotations

import argparse
import sys
from datetime import date, datetime, timezone
from pathlib import Path

from market_ingest.common.config_loader import IngestConfig, load_config
from market_ingest.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS, STAGES
from market_ingest.common.errors import PipelineError
from market_ingest.common.ids import generate_run_id
from market_ingest.common.logging import build_logger, log_event
from market_ingest.pipeline.estimates import run_estimates
from market_ingest.pipeline.ingest import run_ingest
from market_ingest.pipeline.reports import write_run_summary


def run_date_arg(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"run date must be YYYY-MM-DD, got {value!r}") from exc


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=[*STAGES, "all"])
    parser.add_argument("--input", default=None, help="CSV export to ingest")
    parser.add_argument("--run-date", default=None, type=run_date_arg)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--data-dir", default="./data")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--strict", action="store_true")
    return parser.parse_args(argv)


def execute_stage(
    stage: str,
    args: argparse.Namespace,
    config: IngestConfig,
    data_dir: Path,
    run_id: str,
    logger,
) -> bool:
    """Run one stage; returns True when some rows were skipped."""
    if stage == "ingest":
        report = run_ingest(Path(args.input), config, data_dir, run_id, logger, strict=args.strict)
        return report["counts"]["failed_rows"] > 0
    if stage == "estimates":
        run_estimates(config, data_dir)
        return False
    raise ValueError(f"Unknown stage: {stage}")


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    run_date = args.run_date or datetime.now(tz=timezone.utc).date().isoformat()
    config_dir = Path(args.config_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None
    data_dir = Path(args.data_dir)

    logger = build_logger(run_id, data_dir=data_dir, level=args.log_level)
    config = load_config(config_dir, overlay_config_dir=overlay_config_dir)
    stages = STAGES if args.command == "all" else (args.command,)

    if "ingest" in stages and (not args.input or not Path(args.input).exists()):
        log_event(
            logger,
            f"missing CSV input: {args.input}",
            run_id=run_id,
            stage="ingest",
            event="STAGE_FAIL",
            status="error",
            error_code="STAGE_ERROR",
        )
        return EXIT_HARD_FAIL

    had_partial_failure = False
    stage_failures: list[str] = []

    for stage in stages:
        log_event(logger, "stage start", run_id=run_id, stage=stage, event="STAGE_START", status="ok")
        try:
            if execute_stage(stage, args, config, data_dir, run_id, logger):
                had_partial_failure = True
        except PipelineError as exc:
            had_partial_failure = True
            stage_failures.append(stage)
            log_event(
                logger,
                f"stage {stage} failed: {exc}",
                run_id=run_id,
                stage=stage,
                event="STAGE_FAIL",
                status="error",
                error_code=exc.error_code,
            )
            if exc.error_code == "CONTRACT_ERROR":
                return EXIT_HARD_FAIL
            if args.strict:
                return EXIT_HARD_FAIL
            continue
        log_event(logger, "stage end", run_id=run_id, stage=stage, event="STAGE_END", status="ok")

    write_run_summary(
        data_dir,
        run_id=run_id,
        run_date=run_date,
        stages=list(stages),
        report_filename=config.report_filename,
        stage_failures=stage_failures,
    )
    if had_partial_failure:
        return EXIT_PARTIAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except PipelineError:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
