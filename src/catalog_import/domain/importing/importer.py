"""Reconcile one interchange performer record with the performer store.

Stages run strictly in order::

    INIT -> PRE_IMPORTED -> MATCHED -> CREATED | UPDATED -> POST_IMPORTED

``pre_import`` does all the work that can fail without touching the performer
table (mapping, image decoding, tag resolution). Only then is the store asked
whether the performer exists, and the candidate is created or written over the
existing row. Tag links, the image and external ids need the performer id and
are pushed last, in that order; the first failure aborts the remaining steps.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from catalog_import.domain.model import ExternalID, MissingRefPolicy
from catalog_import.domain.ports.errors import StoreError

from .decode import process_base64_image
from .errors import (
    CreateError,
    ImportStateError,
    PostImportError,
    PostImportStep,
    UpdateError,
)
from .identity import find_existing_id
from .mapping import performer_record_to_performer
from .references import ResolvedTags, resolve_tags

if TYPE_CHECKING:
    from collections.abc import Iterator

    from catalog_import.domain.model import Performer, PerformerID, Tag
    from catalog_import.domain.ports.persistence import (
        PerformerNameFinderCreatorUpdater,
        TagNameFinderCreator,
    )

    from .schema import PerformerRecord


log = getLogger(__name__)


class ImportState(StrEnum):
    INIT = "init"
    PRE_IMPORTED = "pre_imported"
    MATCHED = "matched"
    CREATED = "created"
    UPDATED = "updated"
    POST_IMPORTED = "post_imported"


class ImportAction(StrEnum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass(slots=True, frozen=True)
class ImportResult:
    """Outcome of importing one performer."""

    id: PerformerID
    action: ImportAction
    created_tags: tuple[str, ...] = ()


@dataclass(slots=True)
class PerformerImporter:
    """Import a single :class:`PerformerRecord` through the store ports."""

    performers: PerformerNameFinderCreatorUpdater
    tags: TagNameFinderCreator
    record: PerformerRecord
    missing_refs: MissingRefPolicy = MissingRefPolicy.FAIL

    state: ImportState = field(default=ImportState.INIT, init=False)
    _performer: Performer | None = field(default=None, init=False, repr=False)
    _resolved_tags: ResolvedTags = field(default_factory=ResolvedTags, init=False, repr=False)
    _image: bytes | None = field(default=None, init=False, repr=False)

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def performer(self) -> Performer:
        """Candidate performer built by :meth:`pre_import`."""
        if self._performer is None:
            raise ImportStateError("pre_import() has not run")
        return self._performer

    @property
    def resolved_tags(self) -> tuple[Tag, ...]:
        return self._resolved_tags.tags

    @property
    def image(self) -> bytes | None:
        return self._image

    def run(self) -> ImportResult:
        """Execute every stage and report what happened."""

        self.pre_import()
        existing_id = self.find_existing_id()
        if existing_id is None:
            performer_id = self.create()
            action = ImportAction.CREATED
        else:
            self.update(existing_id)
            performer_id = existing_id
            action = ImportAction.UPDATED
        self.post_import(performer_id)

        log.info("Performer %s %s (id=%s)", self.name, action, performer_id)
        return ImportResult(
            id=performer_id,
            action=action,
            created_tags=tuple(tag.name for tag in self._resolved_tags.created),
        )

    def pre_import(self) -> None:
        """Build the candidate performer, resolve its tags and decode its image."""

        self._require(ImportState.INIT)
        performer = performer_record_to_performer(self.record)
        # image first: tag resolution writes to the tag store under CREATE
        image = process_base64_image(self.record.image) if self.record.image else None
        resolved = ResolvedTags()
        if self.record.tags:
            resolved = resolve_tags(self.tags, self.record.tags, self.missing_refs)

        self._performer = performer
        self._resolved_tags = resolved
        self._image = image
        self.state = ImportState.PRE_IMPORTED
        log.debug(
            "Pre-imported performer %s: tags=%d, image=%s",
            self.name,
            len(resolved.tags),
            image is not None,
        )

    def find_existing_id(self) -> PerformerID | None:
        self._require(ImportState.PRE_IMPORTED)
        existing_id = find_existing_id(self.performers, self.name)
        self.state = ImportState.MATCHED
        log.debug("Performer %s matched existing id %s", self.name, existing_id)
        return existing_id

    def create(self) -> PerformerID:
        self._require(ImportState.MATCHED)
        try:
            created = self.performers.create(self.performer)
        except StoreError as exc:
            raise CreateError(f"error creating performer {self.name!r}") from exc
        if created.id is None:
            raise CreateError(f"store assigned no id to performer {self.name!r}")
        self._performer = created
        self.state = ImportState.CREATED
        return created.id

    def update(self, performer_id: PerformerID) -> None:
        self._require(ImportState.MATCHED)
        updated = self.performer.with_id(performer_id)
        try:
            self.performers.update(updated)
        except StoreError as exc:
            raise UpdateError(f"error updating existing performer {self.name!r}") from exc
        self._performer = updated
        self.state = ImportState.UPDATED

    def post_import(self, performer_id: PerformerID) -> None:
        """Attach tags, image and external ids to the performer ``performer_id``."""

        self._require(ImportState.CREATED, ImportState.UPDATED)

        tag_ids = self._resolved_tags.ids
        if tag_ids:
            with _post_import_step(PostImportStep.TAGS, performer_id):
                self.performers.update_tags(performer_id, tag_ids)

        if self._image:
            with _post_import_step(PostImportStep.IMAGE, performer_id):
                self.performers.update_image(performer_id, self._image)

        if self.record.external_ids:
            external_ids = [
                ExternalID(source=payload.source, identifier=payload.identifier)
                for payload in self.record.external_ids
            ]
            with _post_import_step(PostImportStep.EXTERNAL_IDS, performer_id):
                self.performers.update_external_ids(performer_id, external_ids)

        self.state = ImportState.POST_IMPORTED

    def _require(self, *states: ImportState) -> None:
        if self.state not in states:
            expected = " or ".join(states)
            raise ImportStateError(f"importer is {self.state}, expected {expected}")


@contextmanager
def _post_import_step(step: PostImportStep, performer_id: PerformerID) -> Iterator[None]:
    try:
        yield
    except StoreError as exc:
        raise PostImportError(step, performer_id) from exc
