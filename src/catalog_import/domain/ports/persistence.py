"""Ports for persisting performers and tags.

Each protocol is a narrow capability: the importer asks only for the operations
it uses, so tests can supply in-memory fakes. Implementations raise
:class:`~catalog_import.domain.ports.errors.StoreError` on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from catalog_import.domain.model import ExternalID, Performer, PerformerID, Tag, TagID


@runtime_checkable
class NameFinder[TEntity](Protocol):
    """Lookup of entities by their natural key."""

    def find_by_names(self, names: Sequence[str], *, nocase: bool = False) -> list[TEntity]: ...


@runtime_checkable
class TagNameFinderCreator(NameFinder["Tag"], Protocol):
    """Persistence contract for tags referenced by imports."""

    def create(self, tag: Tag) -> Tag:
        """Insert ``tag`` and return it with its assigned id."""
        ...


@runtime_checkable
class PerformerNameFinderCreator(NameFinder["Performer"], Protocol):
    def create(self, performer: Performer) -> Performer:
        """Insert ``performer`` and return it with its assigned id."""
        ...


@runtime_checkable
class PerformerNameFinderCreatorUpdater(PerformerNameFinderCreator, Protocol):
    """Persistence contract for performers written by imports."""

    def update(self, performer: Performer) -> None: ...

    def update_tags(self, performer_id: PerformerID, tag_ids: Sequence[TagID]) -> None: ...

    def update_image(self, performer_id: PerformerID, image: bytes) -> None: ...

    def update_external_ids(
        self, performer_id: PerformerID, external_ids: Sequence[ExternalID]
    ) -> None: ...
