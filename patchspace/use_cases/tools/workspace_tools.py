"""
Workspace tools (write_file, read_file, edit_file, ...) mapped to the Files use cases.

This is the operation boundary: every WorkspaceError raised below is turned
into a ``{"success": False, "error": ...}`` value here and never escapes.
"""

import json
import logging
from typing import Any, Optional

from typing_extensions import assert_never

from patchspace.entities.operations import (
    TOOL_NAMES,
    DeleteFolderOperation,
    DeleteOperation,
    EditOperation,
    GrepOperation,
    ListOperation,
    LiteralReplaceOperation,
    ReadOperation,
    WorkspaceOperation,
    WriteOperation,
    parse_operation,
)
from patchspace.entities.patch import PatchResult
from patchspace.exceptions import (
    PathNotFoundError,
    SearchTextNotFoundError,
    WorkspaceError,
)
from patchspace.ports.tools.tools_port import ToolsHandlerPort, ToolSpec
from patchspace.use_cases.files.delete_files import (
    DeleteFileUseCase,
    DeleteFolderUseCase,
)
from patchspace.use_cases.files.edit_file import EditFileUseCase, ReplaceStringUseCase
from patchspace.use_cases.files.list_files import ListFilesUseCase
from patchspace.use_cases.files.read_file import ReadFileUseCase
from patchspace.use_cases.files.search_files import GrepSearchUseCase
from patchspace.use_cases.files.write_file import WriteFileUseCase
from patchspace.utils.diff import diff_lines, summarize_diff

BLOCK_FORMAT = "<<<<<<< SEARCH\\n[find]\\n=======\\n[replace]\\n>>>>>>> REPLACE"


class WorkspaceToolsHandler(ToolsHandlerPort):
    """Handler for the virtual workspace tools of one session."""

    def __init__(
        self,
        session_id: str,
        write_file_uc: WriteFileUseCase,
        read_file_uc: ReadFileUseCase,
        edit_file_uc: EditFileUseCase,
        replace_string_uc: ReplaceStringUseCase,
        delete_file_uc: DeleteFileUseCase,
        delete_folder_uc: DeleteFolderUseCase,
        list_files_uc: ListFilesUseCase,
        grep_search_uc: GrepSearchUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the workspace tools handler.

        Args:
            session_id: Session whose workspace the tools operate on
            logger: Logger instance to use for logging
        """
        self._session_id = session_id
        self._write_file_uc = write_file_uc
        self._read_file_uc = read_file_uc
        self._edit_file_uc = edit_file_uc
        self._replace_string_uc = replace_string_uc
        self._delete_file_uc = delete_file_uc
        self._delete_folder_uc = delete_folder_uc
        self._list_files_uc = list_files_uc
        self._grep_search_uc = grep_search_uc
        self._logger = logger or logging.getLogger(__name__)

    @property
    def session_id(self) -> str:
        return self._session_id

    # ------------------------- internal helpers -------------------------
    def _patch_response(
        self, result: PatchResult, message: str, include_diff: bool
    ) -> dict[str, Any]:
        response: dict[str, Any] = {
            "success": True,
            "message": message,
            "filePath": result.resolved_path,
            "action": result.action,
        }
        if include_diff:
            lines = list(diff_lines(result.old_content, result.new_content))
            summary = summarize_diff(lines)
            response["diff"] = [line.to_dict() for line in lines]
            response["additions"] = summary.additions
            response["removals"] = summary.removals
        return response

    def _failure(self, error: WorkspaceError, **extra: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "error": str(error)}
        if isinstance(error, PathNotFoundError) and error.suggestions:
            payload["suggestions"] = error.suggestions
        payload.update(extra)
        return payload

    def _run_edit(self, op: EditOperation) -> dict[str, Any]:
        try:
            result = self._edit_file_uc.execute(
                self._session_id, op.file_path, op.search_replace_block, op.replace_all
            )
        except SearchTextNotFoundError as e:
            return self._failure(e, searchStr=e.snippet)
        message = f"File {result.resolved_path} edited successfully"
        message += " (whitespace-flexible match)." if result.flexible_match else "."
        response = self._patch_response(result, message, op.include_diff)
        response["flexibleMatch"] = result.flexible_match
        return response

    def _run_literal_replace(self, op: LiteralReplaceOperation) -> dict[str, Any]:
        try:
            result = self._replace_string_uc.execute(
                self._session_id,
                op.file_path,
                op.old_string,
                op.new_string,
                op.replace_all,
                op.case_insensitive,
            )
        except SearchTextNotFoundError as e:
            return self._failure(e, oldString=e.snippet)
        response = self._patch_response(
            result, f"File {result.resolved_path} modified successfully.", op.include_diff
        )
        response["replacements"] = result.replacements
        return response

    # ------------------------- operation boundary -------------------------
    def execute(self, operation: WorkspaceOperation) -> dict[str, Any]:
        """
        Execute a validated operation.

        Returns:
            Structured result; failures come back as ``success: False``
        """
        sid = self._session_id
        try:
            match operation:
                case WriteOperation():
                    written = self._write_file_uc.execute(
                        sid, operation.path, operation.content
                    )
                    return {
                        "success": True,
                        "message": f"File {written.path} {written.action} successfully.",
                        "path": written.path,
                        "action": written.action,
                    }
                case ReadOperation():
                    read = self._read_file_uc.execute(
                        sid, operation.path, operation.start_line, operation.end_line
                    )
                    response: dict[str, Any] = {
                        "success": True,
                        "path": read.path,
                        "content": read.content,
                        "totalLines": read.total_lines,
                    }
                    if read.truncated:
                        response["truncated"] = True
                        response["message"] = read.message
                    return response
                case EditOperation():
                    return self._run_edit(operation)
                case LiteralReplaceOperation():
                    return self._run_literal_replace(operation)
                case DeleteOperation():
                    deleted = self._delete_file_uc.execute(sid, operation.path)
                    return {
                        "success": True,
                        "message": f"File {deleted.path} deleted.",
                        "path": deleted.path,
                    }
                case DeleteFolderOperation():
                    removed = self._delete_folder_uc.execute(sid, operation.path)
                    return {
                        "success": True,
                        "message": (
                            f"Folder {operation.path} deleted "
                            f"({removed.files_deleted} files removed)."
                        ),
                        "path": operation.path,
                        "filesDeleted": removed.files_deleted,
                    }
                case ListOperation():
                    records = self._list_files_uc.execute(sid, operation.path)
                    files = [record.list_entry() for record in records]
                    return {"success": True, "files": files, "count": len(files)}
                case GrepOperation():
                    found = self._grep_search_uc.execute(
                        sid, operation.pattern, operation.path, operation.case_sensitive
                    )
                    return {
                        "success": True,
                        "results": [
                            {
                                "filePath": m.file_path,
                                "lineNumber": m.line_number,
                                "lineContent": m.line_content,
                            }
                            for m in found.matches
                        ],
                        "totalMatches": found.total_matches,
                    }
                case _:
                    assert_never(operation)
        except WorkspaceError as e:
            self._logger.info(f"Tool {operation.tool} failed: {e}")
            return self._failure(e)

    def run(self, name: str, arguments: dict[str, Any]) -> dict[str, Any]:
        """
        Validate raw arguments and execute the named tool.

        Raises:
            ValueError: If this handler does not know the tool
        """
        if name not in TOOL_NAMES:
            raise ValueError(f"Unknown tool: {name}")
        try:
            operation = parse_operation(name, arguments)
        except WorkspaceError as e:
            return self._failure(e)
        self._logger.info(f"Executing {name} tool in session {self._session_id}")
        return self.execute(operation)

    def available_tools(self) -> list[ToolSpec]:
        """
        Get a list of available workspace tools.

        Returns:
            List of tool specifications for workspace operations
        """
        return [
            {
                "name": "write_file",
                "description": "Create a file or overwrite an existing one with full content.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string", "description": "File path"},
                        "content": {"type": "string", "description": "Full file content"},
                    },
                    "required": ["path", "content"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "read_file",
                "description": (
                    "Read a file. Files over 200 lines are truncated unless a line range is given."
                ),
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string"},
                        "startLine": {"type": "integer", "description": "1-based first line"},
                        "endLine": {"type": "integer", "description": "1-based last line (inclusive)"},
                        "lineRange": {"type": "string", "description": "Line range such as '10-40'"},
                    },
                    "required": ["path"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "edit_file",
                "description": "Edit a file with a search/replace block.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "filePath": {"type": "string"},
                        "searchReplaceBlock": {
                            "type": "string",
                            "description": f"Search/replace in format: {BLOCK_FORMAT}",
                        },
                        "replaceAll": {
                            "type": "boolean",
                            "description": "Replace all occurrences (default false)",
                        },
                        "includeDiff": {
                            "type": "boolean",
                            "description": "Return a line diff of the change (default false)",
                        },
                    },
                    "required": ["filePath", "searchReplaceBlock"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "client_replace_string_in_file",
                "description": "Replace a literal string in a file, optionally case-insensitive.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "filePath": {"type": "string"},
                        "oldString": {"type": "string"},
                        "newString": {"type": "string"},
                        "replaceAll": {"type": "boolean"},
                        "caseInsensitive": {"type": "boolean"},
                        "includeDiff": {"type": "boolean"},
                    },
                    "required": ["filePath", "oldString", "newString"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "delete_file",
                "description": "Delete a file.",
                "parameters": {
                    "type": "object",
                    "properties": {"path": {"type": "string"}},
                    "required": ["path"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "delete_folder",
                "description": "Delete a folder and every file below it.",
                "parameters": {
                    "type": "object",
                    "properties": {"path": {"type": "string"}},
                    "required": ["path"],
                    "additionalProperties": False,
                },
            },
            {
                "name": "list_files",
                "description": "List files, optionally under a directory.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "path": {"type": "string", "description": "Directory prefix"},
                    },
                    "additionalProperties": False,
                },
            },
            {
                "name": "grep_search",
                "description": "Search file contents line by line with a regular expression.",
                "parameters": {
                    "type": "object",
                    "properties": {
                        "pattern": {"type": "string"},
                        "path": {"type": "string", "description": "Path prefix to search in"},
                        "caseSensitive": {
                            "type": "boolean",
                            "description": "Match case exactly (default false)",
                        },
                    },
                    "required": ["pattern"],
                    "additionalProperties": False,
                },
            },
        ]

    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        """
        Dispatch a tool invocation and return its JSON-encoded result.

        Raises:
            ValueError: If the tool name is unknown
        """
        return json.dumps(self.run(name, arguments), ensure_ascii=False)
