"""SQLAlchemy table metadata for performers, tags and their associations."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Dialect,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    String,
    Table,
    TypeDecorator,
    UniqueConstraint,
)

from catalog_import.domain.model import GenderEnum

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


class StringTupleType(TypeDecorator[tuple[str, ...]]):
    """Ordered list of strings stored as a JSON array."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: tuple[str, ...] | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        return json.dumps(list(value))

    def process_result_value(self, value: str | None, dialect: Dialect) -> tuple[str, ...]:
        _ = dialect
        if value is None:
            return ()
        loaded = json.loads(value)
        if not isinstance(loaded, list):
            return ()
        items = cast(list[Any], loaded)
        return tuple(item for item in items if isinstance(item, str))


metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

performer_table = Table(
    "performer",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False),
    Column("checksum", String(32), nullable=False),
    Column("gender", Enum(GenderEnum, native_enum=False), nullable=True),
    Column("url", String, nullable=False, default=""),
    Column("twitter", String, nullable=False, default=""),
    Column("instagram", String, nullable=False, default=""),
    Column("ethnicity", String, nullable=False, default=""),
    Column("country", String, nullable=False, default=""),
    Column("eye_color", String, nullable=False, default=""),
    Column("hair_color", String, nullable=False, default=""),
    Column("height", String, nullable=False, default=""),
    Column("measurements", String, nullable=False, default=""),
    Column("fake_tits", String, nullable=False, default=""),
    Column("career_length", String, nullable=False, default=""),
    Column("tattoos", String, nullable=False, default=""),
    Column("piercings", String, nullable=False, default=""),
    Column("details", String, nullable=False, default=""),
    Column("aliases", StringTupleType(), nullable=False, default=()),
    Column("favorite", Boolean, nullable=False, default=False),
    Column("ignore_auto_tag", Boolean, nullable=False, default=False),
    Column("rating", Float, nullable=True),
    Column("weight", Integer, nullable=True),
    Column("birthdate", Date, nullable=True),
    Column("death_date", Date, nullable=True),
    Column("created_at", UTCDateTime(), nullable=True),
    Column("updated_at", UTCDateTime(), nullable=True),
    Index("ix_performer_name", "name"),
)

tag_table = Table(
    "tag",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String, nullable=False, unique=True),
    Column("description", String, nullable=True),
    Column("ignore_auto_tag", Boolean, nullable=False, default=False),
    Column("created_at", UTCDateTime(), nullable=True),
    Column("updated_at", UTCDateTime(), nullable=True),
)

performer_tag_table = Table(
    "performer_tag",
    metadata,
    Column(
        "performer_id",
        Integer,
        ForeignKey("performer.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("tag_id", Integer, ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True),
)

performer_image_table = Table(
    "performer_image",
    metadata,
    Column(
        "performer_id",
        Integer,
        ForeignKey("performer.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("image", LargeBinary, nullable=False),
)

performer_external_id_table = Table(
    "performer_external_id",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "performer_id",
        Integer,
        ForeignKey("performer.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("source", String, nullable=False),
    Column("identifier", String, nullable=False),
    UniqueConstraint("performer_id", "source", "identifier"),
    Index("ix_performer_external_id_owner", "performer_id"),
)


def create_all_tables(engine: Engine) -> None:
    """Create any missing tables on ``engine``."""

    log.info("Creating catalog tables")
    metadata.create_all(engine, checkfirst=True)
