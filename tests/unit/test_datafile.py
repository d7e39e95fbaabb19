# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tests for catalog document storage."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from updatesite.core.exceptions import StorageError
from updatesite.storage.datafile import DataFile


class TestDataFile:
    def test_path_layout(self, tmp_path) -> None:
        data_file = DataFile(tmp_path, "simple")
        assert data_file.path == tmp_path / "updates" / "simple.json"

    def test_read_missing_returns_none(self, tmp_path) -> None:
        data_file = DataFile(tmp_path, "simple")
        assert data_file.read() is None
        assert not data_file.exists()
        assert data_file.timestamp() is None

    def test_write_then_read(self, tmp_path) -> None:
        data_file = DataFile(tmp_path, "simple")
        data_file.write('{"plugins": {}}')

        assert data_file.exists()
        assert data_file.read() == '{"plugins": {}}'
        assert data_file.timestamp() is not None

    def test_write_replaces_previous(self, tmp_path) -> None:
        data_file = DataFile(tmp_path, "simple")
        data_file.write("first")
        data_file.write("second")
        assert data_file.read() == "second"

    def test_no_temp_files_left(self, tmp_path) -> None:
        data_file = DataFile(tmp_path, "simple")
        data_file.write("doc")
        assert [p.name for p in (tmp_path / "updates").iterdir()] == ["simple.json"]

    def test_unicode_round_trip(self, tmp_path) -> None:
        data_file = DataFile(tmp_path, "simple")
        data_file.write('{"title": "Plugin été"}')
        assert "été" in data_file.read()

    def test_delete(self, tmp_path) -> None:
        data_file = DataFile(tmp_path, "simple")
        data_file.write("doc")
        assert data_file.delete() is True
        assert data_file.delete() is False
        assert data_file.read() is None

    @pytest.mark.parametrize("site_id", ["", "..", "a/b", "a\\b"])
    def test_invalid_site_id(self, tmp_path, site_id: str) -> None:
        with pytest.raises(StorageError):
            DataFile(tmp_path, site_id)

    def test_write_failure_raises_storage_error(self, tmp_path) -> None:
        blocker = tmp_path / "updates"
        blocker.write_text("not a directory")
        with pytest.raises(StorageError):
            DataFile(tmp_path, "simple").write("doc")

    def test_timestamp_failure_raises_storage_error(self, tmp_path) -> None:
        data_file = DataFile(tmp_path, "simple")
        data_file.write("doc")
        with patch.object(Path, "stat", side_effect=PermissionError("denied")):
            with pytest.raises(StorageError, match="Failed to stat"):
                data_file.timestamp()
