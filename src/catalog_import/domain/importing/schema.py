"""Pydantic models describing the performer interchange format."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _split_aliases(value: object) -> object:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(alias.strip() for alias in value.split(",") if alias.strip())
    return value


def _none_to_empty(value: object) -> object:
    return "" if value is None else value


class InterchangeBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ExternalIDPayload(InterchangeBaseModel):
    source: str = Field(validation_alias=AliasChoices("source", "endpoint"))
    identifier: str = Field(validation_alias=AliasChoices("identifier", "stash_id"))


class PerformerRecord(InterchangeBaseModel):
    """One exported performer.

    Zero numbers and empty strings mean "not set"; the mapper turns them into
    absent values on the domain side.
    """

    name: str
    gender: str = ""
    url: str = ""
    twitter: str = ""
    instagram: str = ""
    ethnicity: str = ""
    country: str = ""
    eye_color: str = ""
    hair_color: str = ""
    height: str = ""
    measurements: str = ""
    fake_tits: str = ""
    career_length: str = ""
    tattoos: str = ""
    piercings: str = ""
    details: str = ""
    aliases: tuple[str, ...] = ()
    favorite: bool = False
    ignore_auto_tag: bool = False
    rating: float = 0
    weight: int = 0
    birthdate: str = ""
    death_date: str = ""
    image: str = ""
    tags: tuple[str, ...] = ()
    external_ids: tuple[ExternalIDPayload, ...] = Field(
        default=(), validation_alias=AliasChoices("external_ids", "stash_ids")
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None

    _parse_aliases = field_validator("aliases", mode="before")(_split_aliases)
    _normalize_strings = field_validator(
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
        "birthdate",
        "death_date",
        "image",
        mode="before",
    )(_none_to_empty)

    @field_validator("rating", "weight", mode="before")
    @classmethod
    def _none_to_zero(cls, value: object) -> object:
        return 0 if value is None else value

    @field_validator("tags", "external_ids", mode="before")
    @classmethod
    def _none_to_tuple(cls, value: object) -> object:
        if value is None:
            return ()
        return value
