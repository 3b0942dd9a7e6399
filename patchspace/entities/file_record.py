"""
File record domain entity.
"""

from typing import Any

from patchspace.exceptions import WorkspaceError
from patchspace.utils.paths import basename, normalize_path


class FileRecord:
    """
    One entry (file or directory) of a session's virtual workspace.
    """

    def __init__(self, path: str, content: str = "", is_directory: bool = False):
        """
        Initialize the FileRecord entity.

        Args:
            path: Workspace path; stored in its normalized form
            content: Full text of the file (ignored for directories)
            is_directory: Whether the record is a directory entry

        Raises:
            WorkspaceError: If path is empty once normalized
        """
        if not isinstance(path, str) or not normalize_path(path):
            raise WorkspaceError("Path must be a non-empty string")

        self.path = normalize_path(path)
        self.is_directory = is_directory
        self.name = basename(self.path)
        self.file_type = self._find_file_type()
        self.content = ""
        self.size = 0
        if not is_directory:
            self.set_content(content)

    def _find_file_type(self) -> str:
        """Extract the file extension, defaulting to 'text'."""
        if self.is_directory:
            return "directory"
        _, dot, ext = self.name.rpartition(".")
        return ext if dot and ext else "text"

    def set_content(self, content: str) -> None:
        """Replace the content and recompute the size."""
        if self.is_directory:
            raise WorkspaceError(f"Cannot write content to directory: {self.path}")
        self.content = str(content)
        self.size = len(self.content)

    @property
    def line_count(self) -> int:
        return len(self.content.split("\n"))

    def get_details(self) -> dict[str, Any]:
        """
        Get the display details of the record.

        Returns:
            Dictionary with record information
        """
        directory, _, _ = self.path.rpartition("/")
        return {
            "path": self.path,
            "name": self.name,
            "size": self.size,
            "type": self.file_type,
            "directory": directory,
        }

    def list_entry(self) -> dict[str, Any]:
        """Entry shape used by list_files."""
        return {
            "path": self.path,
            "type": "directory" if self.is_directory else "file",
            "size": self.size,
        }

    def __str__(self) -> str:
        return f"FileRecord(name='{self.name}', size={self.size}, type='{self.file_type}')"

    def __repr__(self) -> str:
        return f"FileRecord(path='{self.path}')"
