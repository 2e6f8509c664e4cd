"""Resolve tag names from an import against the tag store."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, assert_never

from catalog_import.domain.model import MissingRefPolicy, Tag
from catalog_import.domain.ports.errors import StoreError

from .errors import MissingReferenceError, ReferenceCreationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalog_import.domain.ports.persistence import TagNameFinderCreator


log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ResolvedTags:
    """Tags backing an import: found in the store plus any created for it."""

    tags: tuple[Tag, ...] = ()
    created: tuple[Tag, ...] = ()

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(tag.id for tag in self.tags if tag.id is not None)


def resolve_tags(
    tags: TagNameFinderCreator,
    names: Sequence[str],
    policy: MissingRefPolicy,
) -> ResolvedTags:
    """Look up ``names`` in one case-sensitive batch and apply ``policy`` to the rest."""

    if not names:
        return ResolvedTags()

    found = tuple(tags.find_by_names(names, nocase=False))
    missing = _missing_names(names, found)
    if not missing:
        return ResolvedTags(tags=found)

    match policy:
        case MissingRefPolicy.FAIL:
            raise MissingReferenceError(missing)
        case MissingRefPolicy.CREATE:
            created = _create_tags(tags, missing)
            return ResolvedTags(tags=(*found, *created), created=created)
        case MissingRefPolicy.IGNORE:
            log.debug("Ignoring missing tags: %s", ", ".join(missing))
            return ResolvedTags(tags=found)
        case _:
            assert_never(policy)


def _missing_names(names: Sequence[str], found: Sequence[Tag]) -> tuple[str, ...]:
    found_names = {tag.name for tag in found}
    missing: list[str] = []
    for name in names:
        if name in found_names or name in missing:
            continue
        missing.append(name)
    return tuple(missing)


def _create_tags(tags: TagNameFinderCreator, names: Sequence[str]) -> tuple[Tag, ...]:
    created: list[Tag] = []
    for name in names:
        try:
            created.append(tags.create(Tag.new(name)))
        except StoreError as exc:
            raise ReferenceCreationError(name) from exc
        log.info("Created missing tag %s", name)
    return tuple(created)
