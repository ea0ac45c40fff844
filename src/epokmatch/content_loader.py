"""Load and validate the era content bank from bundled JSON resources."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from importlib import resources
from pathlib import Path
from typing import Any

from .models import ContentBank, Era

CONTENT_PACKAGE = "epokmatch.content"
BANK_FILE = "eras.json"

logger = logging.getLogger(__name__)


class ContentError(ValueError):
    """Raised when a content bank breaks its load-time invariants."""


def _era_from_dict(raw: dict[str, Any]) -> Era:
    """Build an era from raw JSON content."""
    era_id = str(raw.get("id", "")).strip()
    if not era_id:
        raise ContentError("Era is missing an id.")
    name = str(raw.get("name", "")).strip()
    if not name:
        raise ContentError(f"Era '{era_id}' is missing a name.")
    hints = tuple(str(value).strip() for value in raw.get("hints", []) if str(value).strip())
    if not hints:
        raise ContentError(f"Era '{era_id}' has no valid hints.")
    return Era(id=era_id, name=name, hints=hints)


def bank_from_records(records: Iterable[dict[str, Any]]) -> ContentBank:
    """Build a validated bank from raw era records, keeping their order."""
    eras: list[Era] = []
    seen: set[str] = set()
    for raw in records:
        era = _era_from_dict(raw)
        if era.id in seen:
            raise ContentError(f"Duplicate era id: {era.id}")
        seen.add(era.id)
        eras.append(era)
    if not eras:
        raise ContentError("Content bank has no eras.")
    return ContentBank(eras=tuple(eras))


def _bank_from_payload(payload: object, source: str) -> ContentBank:
    """Accept either a bare list of eras or an object with an ``eras`` list."""
    if isinstance(payload, dict):
        payload = payload.get("eras")
    if not isinstance(payload, list):
        raise ContentError(f"Content bank {source} must hold a list of eras.")
    if not all(isinstance(item, dict) for item in payload):
        raise ContentError(f"Content bank {source} has a non-object era entry.")
    bank = bank_from_records(payload)
    logger.info("Loaded %d eras from %s", len(bank), source)
    return bank


def load_bank() -> ContentBank:
    """Load the bundled bank."""
    entry = resources.files(CONTENT_PACKAGE).joinpath(BANK_FILE)
    raw = json.loads(entry.read_text(encoding="utf-8-sig"))
    return _bank_from_payload(raw, BANK_FILE)


def load_bank_from_file(path: Path | str) -> ContentBank:
    """Load a bank from a JSON file for tests/tools."""
    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8-sig"))
    except json.JSONDecodeError as exc:
        raise ContentError(f"Content bank {file_path} is not valid JSON: {exc}") from exc
    return _bank_from_payload(raw, str(file_path))
