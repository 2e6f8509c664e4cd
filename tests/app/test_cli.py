from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from catalog_import.domain.importing import (
    ImportAction,
    ImportResult,
    MissingReferenceError,
    PerformerRecord,
)
from catalog_import.domain.model import MissingRefPolicy
from catalog_import.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def performer_file(tmp_path: Path) -> Path:
    path = tmp_path / "jane.json"
    path.write_text(json.dumps({"name": "Jane Doe", "tags": ["blonde"]}), encoding="utf-8")
    return path


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    calls: dict[str, object] = {}

    def fake_import(record: PerformerRecord, **kwargs: object) -> ImportResult:
        calls["record"] = record
        calls.update(kwargs)
        return ImportResult(id=1, action=ImportAction.CREATED)

    monkeypatch.setattr(cli, "import_performer", fake_import)
    return calls


def test_cli_imports_file_with_policy(performer_file: Path, captured: dict[str, object]) -> None:
    cli.main(["performer", str(performer_file), "--missing-refs", "create"])

    record = captured["record"]
    assert isinstance(record, PerformerRecord)
    assert record.name == "Jane Doe"
    assert captured["missing_refs"] is MissingRefPolicy.CREATE


def test_cli_defaults_policy_to_none(performer_file: Path, captured: dict[str, object]) -> None:
    cli.main(["performer", str(performer_file)])

    assert captured["missing_refs"] is None


def test_cli_starts_adapter_for_explicit_database(
    monkeypatch: pytest.MonkeyPatch, performer_file: Path, captured: dict[str, object]
) -> None:
    started: dict[str, object] = {}

    def fake_startup(**kwargs: object) -> None:
        started.update(kwargs)

    monkeypatch.setattr(cli, "startup", fake_startup)

    cli.main(
        ["performer", str(performer_file), "--database-uri", "sqlite+pysqlite:///:memory:"]
    )

    assert started == {"database_uri": "sqlite+pysqlite:///:memory:", "force": True}
    assert "record" in captured


def test_cli_invalid_policy_exits_with_usage_error(
    performer_file: Path, captured: dict[str, object]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["performer", str(performer_file), "--missing-refs", "sometimes"])

    assert excinfo.value.code == 2
    assert captured == {}


def test_cli_invalid_log_level_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch, performer_file: Path, captured: dict[str, object]
) -> None:
    monkeypatch.setenv("CATALOG_IMPORT_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["performer", str(performer_file)])

    assert excinfo.value.code == 2
    assert captured == {}


def test_cli_invalid_document_exits_with_usage_error(
    tmp_path: Path, captured: dict[str, object]
) -> None:
    path = tmp_path / "broken.json"
    path.write_text(json.dumps({"rating": "high"}), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["performer", str(path)])

    assert excinfo.value.code == 2
    assert captured == {}


def test_cli_missing_file_exits_with_usage_error(
    tmp_path: Path, captured: dict[str, object]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["performer", str(tmp_path / "absent.json")])

    assert excinfo.value.code == 2
    assert captured == {}


def test_cli_import_failure_exits_with_error(
    monkeypatch: pytest.MonkeyPatch, performer_file: Path
) -> None:
    def fake_import(_record: PerformerRecord, **_kwargs: object) -> ImportResult:
        raise MissingReferenceError(["missing-tag"])

    monkeypatch.setattr(cli, "import_performer", fake_import)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["performer", str(performer_file)])

    assert excinfo.value.code == 1
