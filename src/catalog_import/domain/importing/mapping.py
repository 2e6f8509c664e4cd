"""Translate interchange records into domain performers."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from catalog_import.domain.model import GenderEnum, Performer, checksum_from_string

from .decode import parse_date_string

if TYPE_CHECKING:
    from datetime import date

    from .schema import PerformerRecord


log = getLogger(__name__)


def performer_record_to_performer(record: PerformerRecord) -> Performer:
    """Build the candidate performer for ``record``.

    Optional numbers equal to zero are treated as unset, so an explicit rating or
    weight of 0 cannot be imported. Unparsable dates are dropped rather than
    failing the import.
    """

    return Performer(
        name=record.name,
        checksum=checksum_from_string(record.name),
        gender=_parse_gender(record.gender),
        url=record.url,
        twitter=record.twitter,
        instagram=record.instagram,
        ethnicity=record.ethnicity,
        country=record.country,
        eye_color=record.eye_color,
        hair_color=record.hair_color,
        height=record.height,
        measurements=record.measurements,
        fake_tits=record.fake_tits,
        career_length=record.career_length,
        tattoos=record.tattoos,
        piercings=record.piercings,
        details=record.details,
        aliases=record.aliases,
        favorite=record.favorite,
        ignore_auto_tag=record.ignore_auto_tag,
        rating=record.rating if record.rating != 0 else None,
        weight=record.weight if record.weight != 0 else None,
        birthdate=_optional_date(record.birthdate, field="birthdate", name=record.name),
        death_date=_optional_date(record.death_date, field="death_date", name=record.name),
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _optional_date(value: str, *, field: str, name: str) -> date | None:
    if not value:
        return None
    try:
        return parse_date_string(value)
    except ValueError:
        log.debug("Ignoring unparsable %s %r for performer %s", field, value, name)
        return None


def _parse_gender(value: str) -> GenderEnum | None:
    if not value:
        return None
    try:
        return GenderEnum(value.strip().upper())
    except ValueError:
        log.warning("Unknown gender %r, leaving unset", value)
        return None
