from __future__ import annotations

from datetime import date

import pytest
from sqlalchemy.orm import Session  # noqa: TC002

from catalog_import.adapters.sqlalchemy import (
    SqlAlchemyPerformerRepository,
    SqlAlchemyTagRepository,
)
from catalog_import.domain.model import (
    ExternalID,
    GenderEnum,
    Performer,
    Tag,
    checksum_from_string,
)
from catalog_import.domain.ports.errors import StoreError


def _performer(name: str = "Jane Doe", **fields: object) -> Performer:
    return Performer(name=name, checksum=checksum_from_string(name), **fields)  # type: ignore[arg-type]


def test_performer_round_trip(sqlite_session: Session) -> None:
    repository = SqlAlchemyPerformerRepository(sqlite_session)

    created = repository.create(
        _performer(
            gender=GenderEnum.FEMALE,
            aliases=("JD", "Janie"),
            rating=4.5,
            weight=55,
            birthdate=date(1990, 1, 2),
            favorite=True,
        )
    )

    assert created.id is not None
    loaded = repository.get(created.id)
    assert loaded == created


def test_find_by_names_is_case_sensitive_unless_nocase(sqlite_session: Session) -> None:
    repository = SqlAlchemyPerformerRepository(sqlite_session)
    created = repository.create(_performer("Jane Doe"))

    assert repository.find_by_names(["jane doe"]) == []
    assert [p.id for p in repository.find_by_names(["jane doe"], nocase=True)] == [created.id]
    assert repository.find_by_names([]) == []


def test_update_overwrites_fields(sqlite_session: Session) -> None:
    repository = SqlAlchemyPerformerRepository(sqlite_session)
    created = repository.create(_performer(country="AU"))

    repository.update(_performer(country="NZ").with_id(created.id))  # type: ignore[arg-type]

    loaded = repository.get(created.id)  # type: ignore[arg-type]
    assert loaded is not None
    assert loaded.country == "NZ"


def test_update_requires_existing_row(sqlite_session: Session) -> None:
    repository = SqlAlchemyPerformerRepository(sqlite_session)

    with pytest.raises(StoreError):
        repository.update(_performer())
    with pytest.raises(StoreError):
        repository.update(_performer().with_id(999))


def test_update_tags_replaces_associations(sqlite_session: Session) -> None:
    performers = SqlAlchemyPerformerRepository(sqlite_session)
    tags = SqlAlchemyTagRepository(sqlite_session)
    performer = performers.create(_performer())
    first, second = tags.create(Tag.new("a")), tags.create(Tag.new("b"))
    assert performer.id is not None
    assert first.id is not None
    assert second.id is not None

    performers.update_tags(performer.id, [first.id, second.id, first.id])
    assert performers.tag_ids(performer.id) == sorted([first.id, second.id])

    performers.update_tags(performer.id, [second.id])
    assert performers.tag_ids(performer.id) == [second.id]


def test_update_image_keeps_single_row(sqlite_session: Session) -> None:
    repository = SqlAlchemyPerformerRepository(sqlite_session)
    performer = repository.create(_performer())
    assert performer.id is not None

    repository.update_image(performer.id, b"first")
    repository.update_image(performer.id, b"second")

    assert repository.image(performer.id) == b"second"


def test_update_external_ids_replaces_set(sqlite_session: Session) -> None:
    repository = SqlAlchemyPerformerRepository(sqlite_session)
    performer = repository.create(_performer())
    assert performer.id is not None
    old = ExternalID(source="https://stashdb.org/graphql", identifier="old")
    new = ExternalID(source="https://stashdb.org/graphql", identifier="new")

    repository.update_external_ids(performer.id, [old])
    repository.update_external_ids(performer.id, [new, new])

    assert repository.external_ids(performer.id) == [new]


def test_tag_create_and_find(sqlite_session: Session) -> None:
    repository = SqlAlchemyTagRepository(sqlite_session)

    created = repository.create(Tag.new("blonde"))

    assert created.id is not None
    assert repository.find_by_names(["blonde", "missing"]) == [created]
    assert repository.find_by_names(["BLONDE"]) == []


def test_duplicate_tag_name_raises_store_error(sqlite_session: Session) -> None:
    repository = SqlAlchemyTagRepository(sqlite_session)
    repository.create(Tag.new("blonde"))

    with pytest.raises(StoreError):
        repository.create(Tag.new("blonde"))
