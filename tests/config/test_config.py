from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from catalog_import.config import (
    ConfigurationError,
    get_database_config,
    get_import_config,
    get_log_level,
    get_storage_config,
    optional_env_var,
    parse_missing_refs,
)
from catalog_import.domain.model import MissingRefPolicy

if TYPE_CHECKING:
    from pathlib import Path


def test_optional_env_var_strips_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  value ")

    assert optional_env_var("EXAMPLE_VAR") == "value"


def test_optional_env_var_treats_blank_as_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    assert optional_env_var("EXAMPLE_VAR") is None
    assert optional_env_var("MISSING_VAR") is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("fail", MissingRefPolicy.FAIL),
        ("Create", MissingRefPolicy.CREATE),
        (" IGNORE ", MissingRefPolicy.IGNORE),
    ],
)
def test_parse_missing_refs(raw: str, expected: MissingRefPolicy) -> None:
    assert parse_missing_refs(raw) is expected


def test_parse_missing_refs_rejects_unknown() -> None:
    with pytest.raises(ConfigurationError, match="sometimes"):
        parse_missing_refs("sometimes")


def test_import_config_defaults_to_fail(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("IMPORT_MISSING_REFS", raising=False)

    assert get_import_config().missing_refs is MissingRefPolicy.FAIL


def test_import_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMPORT_MISSING_REFS", "create")

    assert get_import_config().missing_refs is MissingRefPolicy.CREATE


def test_log_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_IMPORT_LOG_LEVEL", "debug")
    assert get_log_level() == logging.DEBUG

    monkeypatch.setenv("CATALOG_IMPORT_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigurationError):
        get_log_level()


def test_database_uri_defaults_to_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("CATALOG_IMPORT_DATA_DIR", str(tmp_path))

    config = get_database_config()

    assert get_storage_config().data_dir == tmp_path
    assert config.uri == f"sqlite+pysqlite:///{tmp_path.resolve() / 'catalog.db'}"


def test_database_uri_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "postgresql://example/catalog")

    assert get_database_config().uri == "postgresql://example/catalog"
