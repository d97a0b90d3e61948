from __future__ import annotations

from pathlib import Path  # noqa: TC003

import pytest

from stocksync.config import (
    MissingConfigurationError,
    get_database_config,
    get_storage_config,
    get_sync_config,
    require_env_vars,
)
from stocksync.config.storage import DEFAULT_DB_FILENAME


def test_storage_prefers_explicit_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    custom = tmp_path / "custom-data"
    monkeypatch.setenv("STOCKSYNC_DATA_DIR", str(custom))

    assert get_storage_config().resolve_data_dir() == custom.resolve()


def test_database_uri_uses_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite:///override.db")

    assert get_database_config().uri == "sqlite:///override.db"


def test_database_uri_creates_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)
    monkeypatch.setenv("STOCKSYNC_DATA_DIR", str(tmp_path / "data-dir"))

    uri = get_database_config().uri

    expected_path = (tmp_path / "data-dir" / DEFAULT_DB_FILENAME).resolve()
    assert uri == f"sqlite+pysqlite:///{expected_path}"
    assert expected_path.parent.exists()


def test_sync_config_without_store_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STOCKSYNC_STORE_ID", raising=False)

    assert get_sync_config().store_id is None


def test_sync_config_reads_store_id(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STOCKSYNC_STORE_ID", " store-1 ")

    assert get_sync_config().store_id == "store-1"


def test_blank_store_id_is_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STOCKSYNC_STORE_ID", "")

    with pytest.raises(MissingConfigurationError, match="STOCKSYNC_STORE_ID"):
        get_sync_config()


def test_require_env_vars_lists_every_missing_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STOCKSYNC_A", raising=False)
    monkeypatch.delenv("STOCKSYNC_B", raising=False)
    monkeypatch.setenv("STOCKSYNC_C", "value")

    with pytest.raises(MissingConfigurationError, match="STOCKSYNC_A, STOCKSYNC_B"):
        require_env_vars(["STOCKSYNC_B", "STOCKSYNC_C", "STOCKSYNC_A"])

    assert require_env_vars(["STOCKSYNC_C"]) == {"STOCKSYNC_C": "value"}
