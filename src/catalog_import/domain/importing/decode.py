"""Decoding helpers for interchange values (dates and embedded images)."""

from __future__ import annotations

import base64
import binascii
import re
from datetime import date, datetime
from typing import Final

from .errors import MappingError

_DATA_URI_PATTERN: Final[re.Pattern[str]] = re.compile(r"^data:.+/(.+);base64,(.*)$", re.DOTALL)
_DATE_FORMATS: Final[tuple[str, ...]] = ("%Y-%m-%d", "%Y-%m-%d %H:%M:%S")


def parse_date_string(value: str) -> date:
    """Parse a calendar date from ``YYYY-MM-DD``, ISO 8601 or ``YYYY-MM-DD HH:MM:SS``.

    Raises ``ValueError`` when no format matches.
    """

    normalized = value.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(normalized, fmt).date()  # noqa: DTZ007
        except ValueError:
            continue
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(normalized).date()
    except ValueError as exc:
        raise ValueError(f"Invalid date string: {value!r}") from exc


def process_base64_image(value: str) -> bytes:
    """Decode a base64 image, optionally wrapped in a ``data:<mime>;base64,`` URI."""

    if not value:
        raise MappingError("invalid image: empty image string")
    match = _DATA_URI_PATTERN.match(value)
    encoded = match.group(2) if match else value
    try:
        data = base64.b64decode("".join(encoded.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MappingError(f"invalid image: {exc}") from exc
    if not data:
        raise MappingError("invalid image: no image data")
    return data
