"""
Tests for the write, read, edit, replace and delete use cases.
"""

import pytest
from unittest.mock import MagicMock

from patchspace.entities.file_record import FileRecord
from patchspace.entities.patch import MatchStrategy, PatchResult
from patchspace.entities.results import DeleteResult, ReadResult, WriteResult
from patchspace.exceptions import PathNotFoundError, WorkspaceError
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort
from patchspace.use_cases.files.delete_files import DeleteFileUseCase, DeleteFolderUseCase
from patchspace.use_cases.files.edit_file import EditFileUseCase, ReplaceStringUseCase
from patchspace.use_cases.files.read_file import ReadFileUseCase
from patchspace.use_cases.files.write_file import WriteFileUseCase


@pytest.fixture
def mock_registry():
    return MagicMock(spec=SessionRegistryPort)


class TestWriteFileUseCase:
    """Test cases for the WriteFileUseCase."""

    def test_execute_success(self, mock_registry, mock_logger):
        record = FileRecord("a.ts", "x")
        mock_registry.get_store.return_value.write.return_value = WriteResult(
            record, "a.ts", "created"
        )

        result = WriteFileUseCase(mock_registry, mock_logger).execute("s1", "a.ts", "x")

        assert result.action == "created"
        mock_registry.get_store.return_value.write.assert_called_once_with("a.ts", "x")
        mock_logger.info.assert_any_call("File a.ts created")

    def test_execute_unexpected_error(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.write.side_effect = OSError("disk")

        with pytest.raises(WorkspaceError, match="Failed to write file a.ts: disk"):
            WriteFileUseCase(mock_registry, mock_logger).execute("s1", "a.ts", "x")


class TestReadFileUseCase:
    """Test cases for the ReadFileUseCase."""

    def test_execute_range(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.read.return_value = ReadResult("a.ts", "2", 3)

        result = ReadFileUseCase(mock_registry, mock_logger).execute("s1", "a.ts", 2, 2)

        assert result.content == "2"
        mock_registry.get_store.return_value.read.assert_called_once_with("a.ts", 2, 2)

    def test_execute_truncated_is_logged(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.read.return_value = ReadResult(
            "big.txt", "...", 500, truncated=True, message="m"
        )

        ReadFileUseCase(mock_registry, mock_logger).execute("s1", "big.txt")

        mock_logger.info.assert_any_call("Read of big.txt truncated (500 lines)")

    def test_not_found_propagates(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.read.side_effect = PathNotFoundError("x.ts")

        with pytest.raises(PathNotFoundError):
            ReadFileUseCase(mock_registry, mock_logger).execute("s1", "x.ts")


class TestEditUseCases:
    """Test cases for the EditFileUseCase and ReplaceStringUseCase."""

    def test_edit_success(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.edit.return_value = PatchResult(
            "a.ts", "edited", MatchStrategy.FLEXIBLE, "a", "b"
        )

        result = EditFileUseCase(mock_registry, mock_logger).execute("s1", "a.ts", "blk", True)

        assert result.flexible_match is True
        mock_registry.get_store.return_value.edit.assert_called_once_with("a.ts", "blk", True)
        mock_logger.info.assert_any_call("File a.ts edited (flexible match)")

    def test_edit_unexpected_error(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.edit.side_effect = KeyError("a.ts")

        with pytest.raises(WorkspaceError, match="Failed to edit file a.ts"):
            EditFileUseCase(mock_registry, mock_logger).execute("s1", "a.ts", "blk")

        mock_logger.error.assert_called_once()

    def test_replace_success(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.replace_string.return_value = PatchResult(
            "a.ts", "modified", MatchStrategy.LITERAL, "aa", "bb", 2
        )

        result = ReplaceStringUseCase(mock_registry, mock_logger).execute(
            "s1", "a.ts", "a", "b", True, False
        )

        assert result.replacements == 2
        mock_registry.get_store.return_value.replace_string.assert_called_once_with(
            "a.ts", "a", "b", True, False
        )
        mock_logger.info.assert_any_call("File a.ts modified (2 replacements)")


class TestDeleteUseCases:
    """Test cases for the DeleteFileUseCase and DeleteFolderUseCase."""

    def test_delete_file(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.delete.return_value = DeleteResult(
            "src/a.ts", ["src/a.ts"]
        )

        result = DeleteFileUseCase(mock_registry, mock_logger).execute("s1", "a.ts")

        assert result.path == "src/a.ts"
        mock_logger.info.assert_any_call("File src/a.ts deleted")

    def test_delete_folder(self, mock_registry, mock_logger):
        mock_registry.get_store.return_value.delete_by_prefix.return_value = DeleteResult(
            "src", ["src/a.ts", "src/b.ts"]
        )

        result = DeleteFolderUseCase(mock_registry, mock_logger).execute("s1", "src")

        assert result.files_deleted == 2
        mock_logger.info.assert_any_call("Folder src deleted (2 files)")

    def test_delete_folder_unexpected_error(self, mock_registry, mock_logger):
        mock_registry.get_store.side_effect = RuntimeError("gone")

        with pytest.raises(WorkspaceError, match="Failed to delete folder src: gone"):
            DeleteFolderUseCase(mock_registry, mock_logger).execute("s1", "src")
