"""Filesystem helpers for CSV exports, JSON documents and YAML config."""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from market_ingest.common.errors import MalformedEncodingError, StageError


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_yaml(path: Path):
    import yaml

    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_json(path: Path, payload) -> None:
    ensure_dir(path.parent)
    # NaN/Infinity are not JSON; refuse them rather than write an unreadable export.
    text = json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True, allow_nan=False)
    with path.open("w", encoding="utf-8") as f:
        f.write(text)
        f.write("\n")


def read_json(path: Path):
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise StageError(f"Unreadable JSON file {path}: {exc}") from exc


def write_csv(path: Path, headers: list[str], rows: Iterable[Mapping[str, object]]) -> None:
    ensure_dir(path.parent)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=headers, extrasaction="ignore")
        writer.writeheader()
        for row in rows:
            writer.writerow(row)


def iter_raw_lines(path: Path) -> Iterator[tuple[int, bytes]]:
    """Yield (1-based line number, undecoded line) pairs, skipping blank lines.

    Lines stay as bytes so one badly encoded row can be rejected on its own
    instead of aborting the read of the whole file.
    """
    with path.open("rb") as f:
        for line_number, raw in enumerate(f, start=1):
            if not raw.strip():
                continue
            yield line_number, raw


def decode_line(raw: bytes, line_number: int, encoding: str = "utf-8") -> str:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise MalformedEncodingError(line_number, encoding, exc.reason) from exc
