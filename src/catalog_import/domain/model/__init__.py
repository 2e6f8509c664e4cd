"""Public domain model surface."""

from __future__ import annotations

from catalog_import.domain.model.enums import GenderEnum, MissingRefPolicy
from catalog_import.domain.model.external_ids import ExternalID
from catalog_import.domain.model.performer import Performer
from catalog_import.domain.model.primitives import (
    Checksum,
    PerformerID,
    TagID,
    checksum_from_string,
)
from catalog_import.domain.model.tag import Tag

__all__ = [  # noqa: RUF022
    # entities
    "Performer",
    "Tag",
    # external ids
    "ExternalID",
    # enums
    "GenderEnum",
    "MissingRefPolicy",
    # primitives
    "Checksum",
    "PerformerID",
    "TagID",
    "checksum_from_string",
]
