"""Read performer interchange files."""

from __future__ import annotations

import json
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from catalog_import.domain.importing import PerformerRecord

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


log = getLogger(__name__)


class InterchangeError(ValueError):
    """Raised when an interchange document cannot be read or validated."""


def parse_performer_record(payload: Mapping[str, object] | PerformerRecord) -> PerformerRecord:
    if isinstance(payload, PerformerRecord):
        return payload
    try:
        return PerformerRecord.model_validate(payload)
    except ValidationError as exc:
        raise InterchangeError(f"Invalid performer record: {exc}") from exc


def load_performer_record(path: Path) -> PerformerRecord:
    """Load and validate the performer document stored at ``path``."""

    try:
        with path.open(encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        raise InterchangeError(f"Cannot read {path}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InterchangeError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise InterchangeError(f"Expected a JSON object in {path}")
    log.debug("Loaded performer document %s", path)
    return parse_performer_record(payload)
