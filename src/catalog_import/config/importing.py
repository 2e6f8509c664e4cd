"""Import behaviour defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from catalog_import.domain.model import MissingRefPolicy

from .env import optional_env_var
from .errors import ConfigurationError

MISSING_REFS_ENV_VAR: Final[str] = "IMPORT_MISSING_REFS"
DEFAULT_MISSING_REFS: Final[MissingRefPolicy] = MissingRefPolicy.FAIL


@dataclass(frozen=True, slots=True)
class ImportConfig:
    missing_refs: MissingRefPolicy = DEFAULT_MISSING_REFS


def parse_missing_refs(value: str) -> MissingRefPolicy:
    """Parse a policy name case-insensitively (``fail``, ``create``, ``ignore``)."""

    try:
        return MissingRefPolicy(value.strip().upper())
    except ValueError as exc:
        choices = ", ".join(policy.value.lower() for policy in MissingRefPolicy)
        raise ConfigurationError(
            f"Invalid missing reference policy {value!r} (expected one of: {choices})"
        ) from exc


def get_import_config() -> ImportConfig:
    raw = optional_env_var(MISSING_REFS_ENV_VAR)
    if raw is None:
        return ImportConfig()
    return ImportConfig(missing_refs=parse_missing_refs(raw))
