"""Document export with upsert-by-id semantics."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from market_ingest.common.errors import ContractError, StageError
from market_ingest.common.fs import read_json, write_json
from market_ingest.common.models import HouseholdRecord


def load_documents(path: Path) -> dict[str, dict]:
    if not path.exists():
        return {}
    try:
        payload = read_json(path)
        return {doc["_id"]: doc for doc in payload["documents"]}
    except (StageError, KeyError, TypeError) as exc:
        raise ContractError(f"Records export {path} is not a valid document collection: {exc!r}") from exc


def upsert_documents(path: Path, records: Iterable[HouseholdRecord]) -> dict[str, int]:
    """Merge records into the export at ``path`` keyed by record id.

    A document with a known id is replaced, except that competitors already
    attached to it are kept when the incoming record carries none.
    """
    documents = load_documents(path)
    inserted = 0
    updated = 0

    for record in records:
        document = record.to_document()
        prior = documents.get(document["_id"])
        if prior is None:
            inserted += 1
        else:
            updated += 1
            if not document["competitors"] and prior.get("competitors"):
                document["competitors"] = list(prior["competitors"])
        documents[document["_id"]] = document

    write_json(path, {"documents": [documents[key] for key in sorted(documents)]})
    return {"inserted": inserted, "updated": updated, "total": len(documents)}


def load_records(path: Path) -> list[HouseholdRecord]:
    documents = load_documents(path)
    try:
        return [HouseholdRecord.from_document(documents[key]) for key in sorted(documents)]
    except (KeyError, TypeError, ValueError) as exc:
        raise ContractError(f"Records export {path} holds a malformed document: {exc!r}") from exc
