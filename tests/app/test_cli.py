from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stocksync.domain.data_integration import IntegrationSummary, RecordFailure
from stocksync.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def sync_file(tmp_path: Path) -> Path:
    path = tmp_path / "sync.jsonl"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> dict[str, object]:
    calls: dict[str, object] = {}

    def fake_integrate_file(path: Path, *, store_id: str | None = None) -> IntegrationSummary:
        calls["path"] = path
        calls["store_id"] = store_id
        return IntegrationSummary(processed=3)

    monkeypatch.delenv("STOCKSYNC_STORE_ID", raising=False)
    monkeypatch.setattr(cli, "integrate_file", fake_integrate_file)
    return calls


def test_integrate_succeeds(sync_file: Path, captured: dict[str, object]) -> None:
    exit_code = cli.main(["integrate", str(sync_file), "--store-id", "store-1"])

    assert exit_code == 0
    assert captured["path"] == sync_file
    assert captured["store_id"] == "store-1"


def test_store_id_defaults_to_environment(
    sync_file: Path, captured: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("STOCKSYNC_STORE_ID", "store-env")

    assert cli.main(["integrate", str(sync_file)]) == 0
    assert captured["store_id"] == "store-env"


def test_store_id_flag_beats_environment(
    sync_file: Path, captured: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("STOCKSYNC_STORE_ID", "store-env")

    assert cli.main(["integrate", str(sync_file), "--store-id", "store-flag", "--verbose"]) == 0
    assert captured["store_id"] == "store-flag"


def test_without_any_store_id_uses_stored_value(
    sync_file: Path, captured: dict[str, object]
) -> None:
    assert cli.main(["integrate", str(sync_file)]) == 0
    assert captured["store_id"] is None


def test_blank_store_id_environment_is_a_usage_error(
    sync_file: Path, captured: dict[str, object], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("STOCKSYNC_STORE_ID", "  ")

    assert cli.main(["integrate", str(sync_file)]) == 2
    assert captured == {}


def test_missing_file_is_a_usage_error(tmp_path: Path, captured: dict[str, object]) -> None:
    assert cli.main(["integrate", str(tmp_path / "missing.jsonl")]) == 2
    assert captured == {}


def test_record_failures_exit_with_one(sync_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_integrate_file(path: Path, *, store_id: str | None = None) -> IntegrationSummary:
        _ = (path, store_id)
        return IntegrationSummary(
            processed=2,
            failures=[RecordFailure(record_id="r-1", record_type="item", message="bad")],
        )

    monkeypatch.setattr(cli, "integrate_file", failing_integrate_file)

    assert cli.main(["integrate", str(sync_file), "--store-id", "store-1"]) == 1


def test_unexpected_errors_exit_with_one(sync_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_integrate_file(path: Path, *, store_id: str | None = None) -> IntegrationSummary:
        raise RuntimeError("disk full")

    monkeypatch.setattr(cli, "integrate_file", broken_integrate_file)

    assert cli.main(["integrate", str(sync_file), "--store-id", "store-1"]) == 1


def test_missing_command_is_rejected_by_argparse() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])

    assert excinfo.value.code == 2
