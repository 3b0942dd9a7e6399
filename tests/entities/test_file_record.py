"""
Tests for the FileRecord entity.
"""

import pytest

from patchspace.entities.file_record import FileRecord
from patchspace.exceptions import WorkspaceError


class TestFileRecord:
    """Test cases for the FileRecord entity."""

    def test_file_creation(self):
        """Test basic record creation."""
        record = FileRecord("src/app.ts", "console.log(1)")

        assert record.path == "src/app.ts"
        assert record.name == "app.ts"
        assert record.file_type == "ts"
        assert record.size == 14
        assert record.is_directory is False

    def test_path_normalized(self):
        """Test that the stored path is always normalized."""
        record = FileRecord("./src//app.ts/", "")

        assert record.path == "src/app.ts"

    def test_file_without_extension(self):
        record = FileRecord("Makefile", "all:")

        assert record.file_type == "text"

    def test_directory(self):
        """Test directory records carry no content."""
        record = FileRecord("src/components", "ignored", is_directory=True)

        assert record.file_type == "directory"
        assert record.content == ""
        assert record.size == 0
        assert record.list_entry() == {
            "path": "src/components",
            "type": "directory",
            "size": 0,
        }

    def test_set_content_updates_size(self):
        """Test that size follows content changes."""
        record = FileRecord("a.txt", "abc")
        record.set_content("abcdef")

        assert record.content == "abcdef"
        assert record.size == 6

    def test_set_content_on_directory_fails(self):
        record = FileRecord("src", is_directory=True)

        with pytest.raises(WorkspaceError, match="Cannot write content to directory"):
            record.set_content("x")

    @pytest.mark.parametrize("path", ["", "/", "./", "//"])
    def test_empty_path_rejected(self, path):
        """Test that paths normalizing to nothing are refused."""
        with pytest.raises(WorkspaceError, match="Path must be a non-empty string"):
            FileRecord(path, "x")

    def test_line_count(self):
        assert FileRecord("a.txt", "a\nb\nc").line_count == 3
        assert FileRecord("a.txt", "").line_count == 1

    def test_get_details(self):
        """Test the details dictionary."""
        details = FileRecord("src/lib/util.py", "x = 1").get_details()

        assert details == {
            "path": "src/lib/util.py",
            "name": "util.py",
            "size": 5,
            "type": "py",
            "directory": "src/lib",
        }

    def test_str_representation(self):
        record = FileRecord("test.py", "print('x')")

        assert str(record) == "FileRecord(name='test.py', size=10, type='py')"
        assert repr(record) == "FileRecord(path='test.py')"
