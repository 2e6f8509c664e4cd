"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from catalog_import.adapters.jsonschema import load_performer_record
from catalog_import.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyImportUnitOfWork,
    is_started,
    startup,
)
from catalog_import.config import get_import_config
from catalog_import.domain.importing import PerformerImporter
from catalog_import.domain.ports.unit_of_work import ImportUnitOfWork

if TYPE_CHECKING:
    from pathlib import Path

    from catalog_import.domain.importing import ImportResult, PerformerRecord
    from catalog_import.domain.model import MissingRefPolicy

UnitOfWorkFactory = Callable[[], ImportUnitOfWork]


log = getLogger(__name__)


def import_performer(
    record: PerformerRecord,
    *,
    missing_refs: MissingRefPolicy | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ImportResult:
    """Import one performer record inside a single unit of work."""

    if unit_of_work_factory is None:
        if not is_started():
            startup()
        unit_of_work_factory = SqlAlchemyImportUnitOfWork
    policy = missing_refs or get_import_config().missing_refs
    log.info("Importing performer %s (missing refs: %s)", record.name, policy)

    with unit_of_work_factory() as uow:
        importer = PerformerImporter(
            performers=uow.repositories.performers,
            tags=uow.repositories.tags,
            record=record,
            missing_refs=policy,
        )
        result = importer.run()
        uow.commit()

    log.info(
        "Finished performer import: id=%s, action=%s, created_tags=%s",
        result.id,
        result.action,
        len(result.created_tags),
    )
    return result


def import_performer_file(
    path: Path,
    *,
    missing_refs: MissingRefPolicy | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> ImportResult:
    """Load the interchange document at ``path`` and import it."""

    record = load_performer_record(path)
    return import_performer(
        record,
        missing_refs=missing_refs,
        unit_of_work_factory=unit_of_work_factory,
    )
