"""Identifiers of an entity in external systems (for example a metadata server)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class ExternalID:
    source: str
    identifier: str
