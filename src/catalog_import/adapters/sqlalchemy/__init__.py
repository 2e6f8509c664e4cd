"""SQLAlchemy adapter package."""

from __future__ import annotations

from .mappings import (
    create_all_tables,
    metadata,
    performer_external_id_table,
    performer_image_table,
    performer_table,
    performer_tag_table,
    tag_table,
)
from .repositories import SqlAlchemyPerformerRepository, SqlAlchemyTagRepository
from .unit_of_work import (
    SqlAlchemyImportUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyImportUnitOfWork",
    "SqlAlchemyPerformerRepository",
    "SqlAlchemyTagRepository",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "metadata",
    "performer_external_id_table",
    "performer_image_table",
    "performer_table",
    "performer_tag_table",
    "shutdown",
    "startup",
]
