"""Import of interchange performer records into the performer store.

Flow for one record:
1) map the record into a candidate ``Performer``
2) resolve tag names under a ``MissingRefPolicy``
3) decode the embedded image
4) match an existing performer by name, then create or update
5) attach tags, image and external ids to the resulting id
"""

from __future__ import annotations

from .decode import parse_date_string, process_base64_image
from .errors import (
    CreateError,
    ImportStateError,
    MappingError,
    MissingReferenceError,
    PerformerImportError,
    PostImportError,
    PostImportStep,
    ReferenceCreationError,
    UpdateError,
)
from .identity import find_existing_id
from .importer import ImportAction, ImportResult, ImportState, PerformerImporter
from .mapping import performer_record_to_performer
from .references import ResolvedTags, resolve_tags
from .schema import ExternalIDPayload, PerformerRecord

__all__ = [
    "CreateError",
    "ExternalIDPayload",
    "ImportAction",
    "ImportResult",
    "ImportState",
    "ImportStateError",
    "MappingError",
    "MissingReferenceError",
    "PerformerImportError",
    "PerformerImporter",
    "PerformerRecord",
    "PostImportError",
    "PostImportStep",
    "ReferenceCreationError",
    "ResolvedTags",
    "UpdateError",
    "find_existing_id",
    "parse_date_string",
    "performer_record_to_performer",
    "process_base64_image",
    "resolve_tags",
]
