"""Run and record identifier helpers."""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from enum import Enum

from market_ingest.common.errors import ConfigError, MissingIdentityFieldError

RECORD_ID_LENGTH = 24


class IdentityDigest(Enum):
    SHA256 = "sha256"
    SHA3_256 = "sha3_256"

    @classmethod
    def from_config(cls, value: str) -> "IdentityDigest":
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise ConfigError(f"identity.digest must be one of: {allowed}") from exc


_DIGEST_CONSTRUCTORS = {
    IdentityDigest.SHA256: hashlib.sha256,
    IdentityDigest.SHA3_256: hashlib.sha3_256,
}


def generate_run_id() -> str:
    now = datetime.now(tz=timezone.utc)
    return now.strftime("run-%Y%m%dT%H%M%S%fZ")


def identity_key(address: str | None, city: str | None, state: str | None) -> str:
    parts = []
    for field_name, value in (("address", address), ("city", city), ("state", state)):
        if value is None:
            raise MissingIdentityFieldError(field_name)
        parts.append(value.strip().lower())
    return "|".join(parts)


def generate_record_id(
    address: str | None,
    city: str | None,
    state: str | None,
    *,
    digest: IdentityDigest = IdentityDigest.SHA256,
) -> str:
    """Return the first 24 hex chars of the digest of the normalised address key.

    Equal (address, city, state) triples after trimming and lowercasing always
    produce the same id, so re-ingesting a file upserts rather than duplicates.
    """
    key = identity_key(address, city, state)
    hashed = _DIGEST_CONSTRUCTORS[digest](key.encode("utf-8")).hexdigest()
    return hashed[:RECORD_ID_LENGTH]
