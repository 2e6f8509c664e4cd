"""Performer interchange (JSON) adapter."""

from __future__ import annotations

from .reader import InterchangeError, load_performer_record, parse_performer_record

__all__ = ["InterchangeError", "load_performer_record", "parse_performer_record"]
