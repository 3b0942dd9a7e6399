"""
Workspace store port interface defining the contract for virtual file operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from patchspace.entities.file_record import FileRecord
from patchspace.entities.patch import PatchResult
from patchspace.entities.results import (
    DeleteResult,
    GrepResult,
    ReadResult,
    WriteResult,
)
from patchspace.utils.paths import ResolvedPath


class WorkspaceStorePort(ABC):
    """Port interface for one session's virtual file store."""

    @abstractmethod
    def resolve(self, path: str) -> ResolvedPath:
        """
        Resolve a possibly imprecise path to a stored record.

        Raises:
            PathNotFoundError: If no unique record matches (carries suggestions)
        """
        pass

    @abstractmethod
    def write(self, path: str, content: str) -> WriteResult:
        """
        Create a file or update the record the path resolves to.

        Returns:
            WriteResult with action "created" or "updated"
        """
        pass

    @abstractmethod
    def read(
        self,
        path: str,
        start_line: Optional[int] = None,
        end_line: Optional[int] = None,
    ) -> ReadResult:
        """
        Read a file, optionally restricted to an inclusive 1-based line range.

        Raises:
            PathNotFoundError: If the path cannot be resolved
        """
        pass

    @abstractmethod
    def edit(self, path: str, block: str, replace_all: bool = False) -> PatchResult:
        """
        Apply a search/replace block to a file.

        Raises:
            PathNotFoundError: If the path cannot be resolved
            InvalidPatchFormatError: If the block has no usable content
            SearchTextNotFoundError: If the search text cannot be located
        """
        pass

    @abstractmethod
    def replace_string(
        self,
        path: str,
        old_string: str,
        new_string: str,
        replace_all: bool = False,
        case_insensitive: bool = False,
    ) -> PatchResult:
        """
        Replace a literal string in a file.

        Raises:
            PathNotFoundError: If the path cannot be resolved
            SearchTextNotFoundError: If old_string does not occur
        """
        pass

    @abstractmethod
    def delete(self, path: str) -> DeleteResult:
        """
        Delete the file the path resolves to.

        Raises:
            PathNotFoundError: If the path cannot be resolved
        """
        pass

    @abstractmethod
    def delete_by_prefix(self, path_prefix: str) -> DeleteResult:
        """
        Delete every record under a directory prefix.

        Raises:
            PathNotFoundError: If nothing lives under the prefix
        """
        pass

    @abstractmethod
    def list(self, path_prefix: Optional[str] = None) -> list[FileRecord]:
        """List records under a prefix, or every record."""
        pass

    @abstractmethod
    def grep(
        self,
        pattern: str,
        path_prefix: Optional[str] = None,
        case_sensitive: bool = False,
    ) -> GrepResult:
        """
        Search file contents line by line with a regular expression.

        Raises:
            InvalidRegexPatternError: If the pattern does not compile
        """
        pass
