"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from market_ingest.common.errors import ConfigError
from market_ingest.common.fs import read_yaml
from market_ingest.common.ids import IdentityDigest
from market_ingest.common.schema import validate_ingest_config

CONFIG_FILENAME = "ingest.yml"


@dataclass(frozen=True)
class IngestConfig:
    encoding: str
    digest: IdentityDigest
    source_epsg: int
    records_filename: str
    report_filename: str
    estimates_filename: str


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Missing config file: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    return _deep_merge(base, overlay)


def load_config(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> IngestConfig:
    overlay_path = None
    if overlay_config_dir is not None:
        overlay_path = overlay_config_dir / CONFIG_FILENAME
    cfg = validate_ingest_config(
        _load_yaml_with_overlay(config_dir / CONFIG_FILENAME, overlay_path),
        allow_unknown=allow_unknown,
    )
    return IngestConfig(
        encoding=cfg["input"]["encoding"],
        digest=IdentityDigest.from_config(cfg["identity"]["digest"]),
        source_epsg=int(cfg["crs"]["source_epsg"]),
        records_filename=cfg["output"]["records_filename"],
        report_filename=cfg["output"]["report_filename"],
        estimates_filename=cfg["output"]["estimates_filename"],
    )
