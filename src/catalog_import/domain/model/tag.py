"""Tags: named references attached to performers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalog_import.domain.model.primitives import TagID


@dataclass(frozen=True, slots=True, kw_only=True)
class Tag:
    name: str
    id: TagID | None = None
    description: str | None = None
    ignore_auto_tag: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def new(cls, name: str) -> Tag:
        """Return an unsaved tag with default attributes."""
        now = datetime.now(UTC)
        return cls(name=name, created_at=now, updated_at=now)

    def with_id(self, tag_id: TagID) -> Tag:
        return replace(self, id=tag_id)
