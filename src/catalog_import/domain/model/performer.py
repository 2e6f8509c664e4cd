"""Performers: the primary entity reconciled by imports.

A ``Performer`` is an immutable value. The store assigns ``id`` on creation;
everything else about the performer is decided before it ever reaches the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date, datetime

    from catalog_import.domain.model.enums import GenderEnum
    from catalog_import.domain.model.primitives import Checksum, PerformerID


@dataclass(frozen=True, slots=True, kw_only=True)
class Performer:
    name: str
    checksum: Checksum
    id: PerformerID | None = None

    gender: GenderEnum | None = None
    url: str = ""
    twitter: str = ""
    instagram: str = ""
    ethnicity: str = ""
    country: str = ""
    eye_color: str = ""
    hair_color: str = ""
    height: str = ""
    measurements: str = ""
    fake_tits: str = ""
    career_length: str = ""
    tattoos: str = ""
    piercings: str = ""
    details: str = ""
    aliases: tuple[str, ...] = field(default_factory=tuple)
    favorite: bool = False
    ignore_auto_tag: bool = False

    # None means "not set"; zero is not representable
    rating: float | None = None
    weight: int | None = None
    birthdate: date | None = None
    death_date: date | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None

    def with_id(self, performer_id: PerformerID) -> Performer:
        """Return a copy carrying the store identity ``performer_id``."""
        return replace(self, id=performer_id)
