"""Error taxonomy for performer imports.

Every failure that aborts an import derives from :class:`PerformerImportError`.
Store failures are chained via ``__cause__``; nothing here is retried.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class PerformerImportError(Exception):
    """Base class for failures while importing a performer."""


class MappingError(PerformerImportError):
    """Raised when the interchange record cannot be mapped (invalid image payload)."""


class MissingReferenceError(PerformerImportError):
    """Raised under the FAIL policy when referenced tags do not exist."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)
        super().__init__(f"tags [{', '.join(self.names)}] not found")


class ReferenceCreationError(PerformerImportError):
    """Raised when auto-creating a missing tag fails. Earlier creations are kept."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"error creating tag {name!r}")


class CreateError(PerformerImportError):
    """Raised when the store rejects a new performer."""


class UpdateError(PerformerImportError):
    """Raised when the store rejects an update of an existing performer."""


class PostImportStep(StrEnum):
    TAGS = "tags"
    IMAGE = "image"
    EXTERNAL_IDS = "external_ids"


_POST_IMPORT_MESSAGES = {
    PostImportStep.TAGS: "failed to associate tags",
    PostImportStep.IMAGE: "error setting performer image",
    PostImportStep.EXTERNAL_IDS: "error setting external ids",
}


class PostImportError(PerformerImportError):
    """Raised when a side effect fails after the performer already has an id."""

    def __init__(self, step: PostImportStep, performer_id: int) -> None:
        self.step = step
        self.performer_id = performer_id
        super().__init__(f"{_POST_IMPORT_MESSAGES[step]} (performer {performer_id})")


class ImportStateError(RuntimeError):
    """Raised when importer stages are invoked out of order."""
