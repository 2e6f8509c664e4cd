"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from catalog_import.adapters.sqlalchemy.mappings import (
    performer_external_id_table,
    performer_image_table,
    performer_table,
    performer_tag_table,
    tag_table,
)
from catalog_import.domain.model import ExternalID, Performer, Tag
from catalog_import.domain.ports.errors import StoreError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from sqlalchemy import ColumnElement, Executable, Result
    from sqlalchemy.orm import Session

    from catalog_import.domain.model import PerformerID, TagID


_PERFORMER_COLUMNS = (
    "name",
    "checksum",
    "gender",
    "url",
    "twitter",
    "instagram",
    "ethnicity",
    "country",
    "eye_color",
    "hair_color",
    "height",
    "measurements",
    "fake_tits",
    "career_length",
    "tattoos",
    "piercings",
    "details",
    "aliases",
    "favorite",
    "ignore_auto_tag",
    "rating",
    "weight",
    "birthdate",
    "death_date",
    "created_at",
    "updated_at",
)


class SqlAlchemySessionRepository:
    """Shared helpers translating SQLAlchemy failures into :class:`StoreError`."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def _execute(self, statement: Executable) -> Result[Any]:
        try:
            return self.session.execute(statement)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc


def _name_filter(column: ColumnElement[str], names: Sequence[str], *, nocase: bool) -> Any:
    if nocase:
        return func.lower(column).in_([name.lower() for name in names])
    return column.in_(list(names))


class SqlAlchemyPerformerRepository(SqlAlchemySessionRepository):
    def find_by_names(self, names: Sequence[str], *, nocase: bool = False) -> list[Performer]:
        if not names:
            return []
        stmt = (
            select(performer_table)
            .where(_name_filter(performer_table.c.name, names, nocase=nocase))
            .order_by(performer_table.c.id)
        )
        return [_performer_from_row(row) for row in self._execute(stmt).mappings()]

    def get(self, performer_id: PerformerID) -> Performer | None:
        stmt = select(performer_table).where(performer_table.c.id == performer_id)
        row = self._execute(stmt).mappings().one_or_none()
        return _performer_from_row(row) if row is not None else None

    def create(self, performer: Performer) -> Performer:
        stmt = insert(performer_table).values(**_performer_values(performer))
        result = self._execute(stmt)
        primary_key = result.inserted_primary_key
        if primary_key is None:
            raise StoreError(f"no id assigned to performer {performer.name!r}")
        return performer.with_id(cast(int, primary_key[0]))

    def update(self, performer: Performer) -> None:
        if performer.id is None:
            raise StoreError(f"cannot update performer {performer.name!r} without an id")
        stmt = (
            update(performer_table)
            .where(performer_table.c.id == performer.id)
            .values(**_performer_values(performer))
        )
        result = self._execute(stmt)
        if cast(int, getattr(result, "rowcount", 0)) == 0:
            raise StoreError(f"performer {performer.id} does not exist")

    def update_tags(self, performer_id: PerformerID, tag_ids: Sequence[TagID]) -> None:
        self._execute(
            delete(performer_tag_table).where(performer_tag_table.c.performer_id == performer_id)
        )
        unique_ids = list(dict.fromkeys(tag_ids))
        if unique_ids:
            self._execute(
                insert(performer_tag_table).values(
                    [{"performer_id": performer_id, "tag_id": tag_id} for tag_id in unique_ids]
                )
            )

    def update_image(self, performer_id: PerformerID, image: bytes) -> None:
        self._execute(
            delete(performer_image_table).where(
                performer_image_table.c.performer_id == performer_id
            )
        )
        self._execute(
            insert(performer_image_table).values(performer_id=performer_id, image=image)
        )

    def update_external_ids(
        self, performer_id: PerformerID, external_ids: Sequence[ExternalID]
    ) -> None:
        self._execute(
            delete(performer_external_id_table).where(
                performer_external_id_table.c.performer_id == performer_id
            )
        )
        unique_ids = list(dict.fromkeys(external_ids))
        if unique_ids:
            self._execute(
                insert(performer_external_id_table).values(
                    [
                        {
                            "performer_id": performer_id,
                            "source": external_id.source,
                            "identifier": external_id.identifier,
                        }
                        for external_id in unique_ids
                    ]
                )
            )

    def tag_ids(self, performer_id: PerformerID) -> list[TagID]:
        stmt = (
            select(performer_tag_table.c.tag_id)
            .where(performer_tag_table.c.performer_id == performer_id)
            .order_by(performer_tag_table.c.tag_id)
        )
        return list(self._execute(stmt).scalars())

    def image(self, performer_id: PerformerID) -> bytes | None:
        stmt = select(performer_image_table.c.image).where(
            performer_image_table.c.performer_id == performer_id
        )
        return self._execute(stmt).scalar_one_or_none()

    def external_ids(self, performer_id: PerformerID) -> list[ExternalID]:
        stmt = (
            select(performer_external_id_table.c.source, performer_external_id_table.c.identifier)
            .where(performer_external_id_table.c.performer_id == performer_id)
            .order_by(performer_external_id_table.c.id)
        )
        return [
            ExternalID(source=source, identifier=identifier)
            for source, identifier in self._execute(stmt).all()
        ]


class SqlAlchemyTagRepository(SqlAlchemySessionRepository):
    def find_by_names(self, names: Sequence[str], *, nocase: bool = False) -> list[Tag]:
        if not names:
            return []
        stmt = (
            select(tag_table)
            .where(_name_filter(tag_table.c.name, names, nocase=nocase))
            .order_by(tag_table.c.id)
        )
        return [_tag_from_row(row) for row in self._execute(stmt).mappings()]

    def create(self, tag: Tag) -> Tag:
        stmt = insert(tag_table).values(
            name=tag.name,
            description=tag.description,
            ignore_auto_tag=tag.ignore_auto_tag,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )
        result = self._execute(stmt)
        primary_key = result.inserted_primary_key
        if primary_key is None:
            raise StoreError(f"no id assigned to tag {tag.name!r}")
        return tag.with_id(cast(int, primary_key[0]))


def _performer_values(performer: Performer) -> dict[str, object]:
    return {column: getattr(performer, column) for column in _PERFORMER_COLUMNS}


def _performer_from_row(row: Mapping[str, Any]) -> Performer:
    values = {column: row[column] for column in _PERFORMER_COLUMNS}
    return Performer(id=row["id"], **values)


def _tag_from_row(row: Mapping[str, Any]) -> Tag:
    return Tag(
        id=row["id"],
        name=row["name"],
        description=row["description"],
        ignore_auto_tag=row["ignore_auto_tag"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


if TYPE_CHECKING:
    from catalog_import.domain.ports.persistence import (
        PerformerNameFinderCreatorUpdater,
        TagNameFinderCreator,
    )

    _session_stub = cast("Session", object())
    _performer_repo: PerformerNameFinderCreatorUpdater = SqlAlchemyPerformerRepository(
        _session_stub
    )
    _tag_repo: TagNameFinderCreator = SqlAlchemyTagRepository(_session_stub)
