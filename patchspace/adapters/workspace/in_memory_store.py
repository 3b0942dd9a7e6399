"""
In-memory workspace store adapter backed by a WorkspaceSession.
"""

import logging
import re
from typing import Optional

from typing_extensions import override

from patchspace.entities.file_record import FileRecord
from patchspace.entities.patch import PatchResult
from patchspace.entities.results import (
    DeleteResult,
    GrepMatch,
    GrepResult,
    ReadResult,
    WriteResult,
)
from patchspace.entities.workspace_session import WorkspaceSession
from patchspace.exceptions import (
    InvalidPatchFormatError,
    InvalidRegexPatternError,
    PathNotFoundError,
    WorkspaceError,
)
from patchspace.ports.workspace.workspace_store_port import WorkspaceStorePort
from patchspace.utils.patch_block import parse_patch_block
from patchspace.utils.patching import apply_block_patch, apply_literal_replace
from patchspace.utils.paths import (
    ResolvedPath,
    normalize_path,
    resolve_path,
    suggest_paths,
)

LIST_FILES_HINT = "Use list_files to see available files."


class InMemoryWorkspaceStore(WorkspaceStorePort):
    """Session-scoped file store; every operation runs under the session lock."""

    def __init__(
        self,
        session: WorkspaceSession,
        logger: Optional[logging.Logger] = None,
        read_max_lines: int = 200,
        grep_max_results: int = 50,
        grep_line_max_chars: int = 200,
        suggestion_limit: int = 3,
    ):
        """
        Initialize the store.

        Args:
            session: Session whose files this store operates on
            logger: Logger instance to use for logging
            read_max_lines: Line count above which un-ranged reads are truncated
            grep_max_results: Maximum grep matches returned
            grep_line_max_chars: Maximum characters kept per grep line
            suggestion_limit: Maximum "did you mean" suggestions
        """
        self._session = session
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._read_max_lines = read_max_lines
        self._grep_max_results = grep_max_results
        self._grep_line_max_chars = grep_line_max_chars
        self._suggestion_limit = suggestion_limit

    @property
    def session(self) -> WorkspaceSession:
        return self._session

    def _not_found(self, path: str, hint: str = LIST_FILES_HINT) -> PathNotFoundError:
        suggestions = suggest_paths(self._session.files, path, self._suggestion_limit)
        return PathNotFoundError(path, suggestions, hint=hint)

    def _resolve_file(self, path: str, hint: str = LIST_FILES_HINT) -> ResolvedPath:
        found = resolve_path(self._session.files, path)
        if found is None:
            raise self._not_found(path, hint)
        if found.record.is_directory:
            raise WorkspaceError(f"Path is a directory, not a file: {found.resolved_path}")
        return found

    @override
    def resolve(self, path: str) -> ResolvedPath:
        with self._session.lock:
            found = resolve_path(self._session.files, path)
            if found is None:
                raise self._not_found(path)
            return found

    @override
    def write(self, path: str, content: str) -> WriteResult:
        with self._session.lock:
            found = resolve_path(self._session.files, path)
            if found is not None:
                found.record.set_content(content)
                return WriteResult(found.record, found.resolved_path, "updated")

            record = FileRecord(path, content)
            self._session.files[record.path] = record
            return WriteResult(record, record.path, "created")

    @override
    def read(
        self,
        path: str,
        start_line: Optional[int] = None,
        end_line: Optional[int] = None,
    ) -> ReadResult:
        with self._session.lock:
            found = self._resolve_file(path)
            full = found.record.content
        lines = full.split("\n")
        total_lines = len(lines)

        if start_line is not None and start_line > 0:
            last = len(lines) - 1
            end_index = min(end_line - 1, last) if end_line else last
            content = "\n".join(lines[start_line - 1 : end_index + 1])
            return ReadResult(found.resolved_path, content, total_lines)

        if total_lines > self._read_max_lines:
            content = "\n".join(lines[: self._read_max_lines])
            return ReadResult(
                found.resolved_path,
                content,
                total_lines,
                truncated=True,
                message=(
                    f"Showing first {self._read_max_lines} of {total_lines} lines. "
                    "Use lineRange for specific sections."
                ),
            )
        return ReadResult(found.resolved_path, full, total_lines)

    @override
    def edit(self, path: str, block: str, replace_all: bool = False) -> PatchResult:
        with self._session.lock:
            found = self._resolve_file(path)
            instruction = parse_patch_block(block)
            if instruction is None:
                raise InvalidPatchFormatError()
            return apply_block_patch(
                found.record,
                instruction,
                replace_all=replace_all,
                resolved_path=found.resolved_path,
                logger=self._logger,
            )

    @override
    def replace_string(
        self,
        path: str,
        old_string: str,
        new_string: str,
        replace_all: bool = False,
        case_insensitive: bool = False,
    ) -> PatchResult:
        with self._session.lock:
            found = self._resolve_file(path)
            return apply_literal_replace(
                found.record,
                old_string,
                new_string,
                replace_all=replace_all,
                case_insensitive=case_insensitive,
                resolved_path=found.resolved_path,
            )

    @override
    def delete(self, path: str) -> DeleteResult:
        with self._session.lock:
            found = resolve_path(self._session.files, path)
            if found is None:
                raise self._not_found(path, hint="")
            del self._session.files[found.resolved_path]
            return DeleteResult(found.resolved_path, [found.resolved_path])

    @override
    def delete_by_prefix(self, path_prefix: str) -> DeleteResult:
        prefix = normalize_path(path_prefix)
        prefix = prefix if prefix.endswith("/") else prefix + "/"
        with self._session.lock:
            doomed = [key for key in self._session.files if key.startswith(prefix)]
            if not doomed:
                raise PathNotFoundError(
                    path_prefix, message=f"Folder not found or empty: {path_prefix}"
                )
            for key in doomed:
                del self._session.files[key]
        return DeleteResult(path_prefix, doomed)

    @override
    def list(self, path_prefix: Optional[str] = None) -> list[FileRecord]:
        prefix = normalize_path(path_prefix or "")
        if prefix in ("", "."):
            prefix = ""
        elif not prefix.endswith("/"):
            prefix += "/"
        with self._session.lock:
            return [
                record
                for key, record in self._session.files.items()
                if key.startswith(prefix)
            ]

    @override
    def grep(
        self,
        pattern: str,
        path_prefix: Optional[str] = None,
        case_sensitive: bool = False,
    ) -> GrepResult:
        flags = 0 if case_sensitive else re.IGNORECASE
        try:
            regex = re.compile(pattern, flags)
        except (re.error, TypeError) as e:
            raise InvalidRegexPatternError(str(pattern), str(e))

        prefix = normalize_path(path_prefix) if path_prefix else ""
        matches: list[GrepMatch] = []
        with self._session.lock:
            for key, record in self._session.files.items():
                if record.is_directory or not record.content:
                    continue
                if prefix and not key.startswith(prefix):
                    continue
                for number, line in enumerate(record.content.split("\n"), start=1):
                    if regex.search(line):
                        matches.append(
                            GrepMatch(
                                key,
                                number,
                                line.strip()[: self._grep_line_max_chars],
                            )
                        )
        return GrepResult(matches[: self._grep_max_results], len(matches))
