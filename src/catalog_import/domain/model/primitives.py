"""Domain primitives: scalar aliases + deterministic helpers."""

from __future__ import annotations

import hashlib

type PerformerID = int
type TagID = int
type Checksum = str


def checksum_from_string(value: str) -> Checksum:
    """Return the md5 hex digest of ``value`` encoded as UTF-8."""

    return hashlib.md5(value.encode("utf-8"), usedforsecurity=False).hexdigest()
