"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class GenderEnum(StrEnum):
    MALE = "MALE"
    FEMALE = "FEMALE"
    TRANSGENDER_MALE = "TRANSGENDER_MALE"
    TRANSGENDER_FEMALE = "TRANSGENDER_FEMALE"
    INTERSEX = "INTERSEX"
    NON_BINARY = "NON_BINARY"


class MissingRefPolicy(StrEnum):
    """Behaviour when a referenced entity named by an import is not in the store."""

    FAIL = "FAIL"
    CREATE = "CREATE"
    IGNORE = "IGNORE"
