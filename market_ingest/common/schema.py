"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

import codecs

from market_ingest.common.errors import ConfigError
from market_ingest.common.geometry import validate_epsg
from market_ingest.common.ids import IdentityDigest


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def validate_ingest_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    top_required = {"input", "identity", "crs", "output"}
    _assert_required_keys(cfg, top_required, "ingest config")
    _assert_no_unknown_keys(cfg, top_required, "ingest config", allow_unknown)

    _assert_required_keys(cfg["input"], {"encoding"}, "input")
    _assert_required_keys(cfg["identity"], {"digest"}, "identity")
    _assert_required_keys(cfg["crs"], {"source_epsg"}, "crs")
    _assert_required_keys(
        cfg["output"],
        {"records_filename", "report_filename", "estimates_filename"},
        "output",
    )

    try:
        codecs.lookup(str(cfg["input"]["encoding"]))
    except LookupError as exc:
        raise ConfigError(f"Unknown input encoding: {cfg['input']['encoding']}") from exc
    IdentityDigest.from_config(cfg["identity"]["digest"])
    validate_epsg(cfg["crs"]["source_epsg"])

    return cfg
