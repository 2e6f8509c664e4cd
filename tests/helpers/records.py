"""Builders for interchange performer records."""

from __future__ import annotations

import base64
from typing import Final

from catalog_import.domain.importing import PerformerRecord

PNG_BYTES: Final[bytes] = b"\x89PNG\r\n\x1a\n" + b"\x00" * 8 + b"fake image payload"
PNG_BASE64: Final[str] = base64.b64encode(PNG_BYTES).decode("ascii")
PNG_DATA_URI: Final[str] = f"data:image/png;base64,{PNG_BASE64}"


def make_record(name: str = "Jane Doe", **fields: object) -> PerformerRecord:
    """Create a validated record with ``fields`` overriding the defaults."""

    return PerformerRecord.model_validate({"name": name, **fields})
