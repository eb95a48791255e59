"""Header resolution and positional field extraction for comma-split rows."""

from __future__ import annotations

from collections import Counter
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Sequence

from market_ingest.common.errors import RowTooShortError


def _normalise_column(name: str) -> str:
    return name.strip().lower()


@lru_cache(maxsize=64)
def resolve_header(header: str) -> Mapping[str, int]:
    """Map each normalised column name to its zero-based position.

    Names are trimmed and lowercased. When a name repeats, the last
    occurrence wins. A blank header yields an empty mapping.
    """
    if not header.strip():
        return MappingProxyType({})
    index: dict[str, int] = {}
    for position, column in enumerate(header.split(",")):
        index[_normalise_column(column)] = position
    return MappingProxyType(index)


def duplicate_columns(header: str) -> list[str]:
    if not header.strip():
        return []
    counts = Counter(_normalise_column(column) for column in header.split(","))
    return sorted(name for name, count in counts.items() if count > 1)


def missing_columns(column_index: Mapping[str, int], expected: Sequence[str]) -> list[str]:
    return [name for name in expected if name not in column_index]


def split_row(line: str) -> list[str]:
    # Plain comma split: quoted cells with embedded commas are not supported.
    return line.rstrip("\r\n").split(",")


def extract_field(column_index: Mapping[str, int], field_name: str, row: Sequence[str]) -> str | None:
    position = column_index.get(field_name)
    if position is None:
        return None
    if position >= len(row):
        raise RowTooShortError(field_name, position, len(row))
    return row[position]
