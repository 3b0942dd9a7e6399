"""
Tests for the LocalSnapshotAdapter.
"""

import json
import os

import pytest

from patchspace.adapters.files.local_snapshot_adapter import LocalSnapshotAdapter
from patchspace.exceptions import WorkspaceError


class TestLocalSnapshotAdapter:
    """Test cases for the LocalSnapshotAdapter."""

    def test_load_directory(self, temp_directory, mock_logger):
        """Test loading a directory, skipping VCS folders."""
        files, tree = LocalSnapshotAdapter(mock_logger).load(temp_directory)

        paths = [f["path"] for f in files]
        assert paths == ["README.md", "src/app.ts"]
        assert tree == paths
        assert files[1]["content"] == "console.log(1)"

    def test_load_directory_skips_binary(self, temp_directory, mock_logger):
        with open(os.path.join(temp_directory, "logo.png"), "wb") as f:
            f.write(b"\x89PNG\xff\xfe")

        files, _ = LocalSnapshotAdapter(mock_logger).load(temp_directory)

        assert "logo.png" not in [f["path"] for f in files]
        mock_logger.warning.assert_called_once_with("Skipping non UTF-8 file logo.png")

    def test_load_json_object(self, tmp_path, mock_logger):
        source = tmp_path / "snap.json"
        source.write_text(
            json.dumps({"files": [{"path": "a.ts", "content": "1"}], "fileTree": ["a.ts"]})
        )

        files, tree = LocalSnapshotAdapter(mock_logger).load(str(source))

        assert files == [{"path": "a.ts", "content": "1"}]
        assert tree == ["a.ts"]

    def test_load_json_list(self, tmp_path, mock_logger):
        source = tmp_path / "snap.json"
        source.write_text(json.dumps([{"path": "a.ts", "content": "1"}]))

        files, tree = LocalSnapshotAdapter(mock_logger).load(str(source))

        assert len(files) == 1
        assert tree == []

    def test_load_invalid_json(self, tmp_path, mock_logger):
        source = tmp_path / "snap.json"
        source.write_text("{not json")

        with pytest.raises(WorkspaceError, match="Cannot read snapshot"):
            LocalSnapshotAdapter(mock_logger).load(str(source))

    def test_load_missing(self, mock_logger):
        with pytest.raises(WorkspaceError, match="Snapshot source does not exist"):
            LocalSnapshotAdapter(mock_logger).load("/nonexistent/snapshot")

    def test_write_back(self, tmp_path, mock_logger):
        written = LocalSnapshotAdapter(mock_logger).write_back(
            str(tmp_path), [{"path": "src/new.ts", "content": "x"}]
        )

        assert written == 1
        assert (tmp_path / "src" / "new.ts").read_text() == "x"

    def test_write_back_stays_inside_root(self, tmp_path, mock_logger):
        """Test that paths resolving outside the root are skipped."""
        root = tmp_path / "snap"
        root.mkdir()

        written = LocalSnapshotAdapter(mock_logger).write_back(
            str(root),
            [
                {"path": "../escaped.txt", "content": "x"},
                {"path": "src/../ok.txt", "content": "y"},
            ],
        )

        assert written == 1
        assert not (tmp_path / "escaped.txt").exists()
        assert (root / "ok.txt").read_text() == "y"
        mock_logger.warning.assert_called_once()
        assert "../escaped.txt" in mock_logger.warning.call_args[0][0]

    def test_write_back_removes_stale(self, temp_directory, mock_logger):
        """Test that files deleted in the session are removed from disk."""
        adapter = LocalSnapshotAdapter(mock_logger)
        adapter.write_back(temp_directory, [], stale=["src/app.ts", "../README.md"])

        assert not os.path.exists(os.path.join(temp_directory, "src", "app.ts"))
        assert os.path.exists(os.path.join(temp_directory, "README.md"))
        mock_logger.info.assert_any_call("Removed src/app.ts (deleted in session)")

    def test_write_back_requires_directory(self, tmp_path, mock_logger):
        snapshot = tmp_path / "snap.json"
        snapshot.write_text("{}")

        with pytest.raises(WorkspaceError, match="not a directory"):
            LocalSnapshotAdapter(mock_logger).write_back(str(snapshot), [])
        assert snapshot.read_text() == "{}"
