"""Match an imported performer against existing performers by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from catalog_import.domain.model import Performer, PerformerID
    from catalog_import.domain.ports.persistence import NameFinder


def find_existing_id(
    performers: NameFinder[Performer],
    name: str,
    *,
    nocase: bool = False,
) -> PerformerID | None:
    """Return the id of the first performer named ``name``, if any."""

    existing = performers.find_by_names([name], nocase=nocase)
    if not existing:
        return None
    return existing[0].id
