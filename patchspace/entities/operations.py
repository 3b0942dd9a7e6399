"""
Workspace tool operations as a closed set of tagged variants.

Each model's ``tool`` literal is the public tool name; field aliases are the
camelCase argument names agents send.
"""

import re
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from patchspace.exceptions import InvalidOperationError

_LINE_RANGE = re.compile(r"^(\d+)-(\d+)$")


class _Operation(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class WriteOperation(_Operation):
    tool: Literal["write_file"] = "write_file"
    path: str = Field(..., min_length=1, description="File path to create or overwrite")
    content: str = Field(..., description="Full file content")


class ReadOperation(_Operation):
    tool: Literal["read_file"] = "read_file"
    path: str = Field(..., min_length=1, description="File path to read")
    start_line: Optional[int] = Field(None, alias="startLine")
    end_line: Optional[int] = Field(None, alias="endLine")
    line_range: Optional[str] = Field(None, alias="lineRange", description="e.g. '10-40'")

    @model_validator(mode="before")
    @classmethod
    def _apply_line_range(cls, data: Any) -> Any:
        # a well-formed lineRange wins over startLine/endLine
        if not isinstance(data, dict):
            return data
        line_range = data.get("lineRange", data.get("line_range"))
        if isinstance(line_range, str):
            match = _LINE_RANGE.match(line_range.strip())
            if match:
                data = {
                    k: v
                    for k, v in data.items()
                    if k not in ("startLine", "start_line", "endLine", "end_line")
                }
                data["startLine"] = int(match.group(1))
                data["endLine"] = int(match.group(2))
        return data


class EditOperation(_Operation):
    tool: Literal["edit_file"] = "edit_file"
    file_path: str = Field(..., min_length=1, alias="filePath")
    search_replace_block: str = Field(..., alias="searchReplaceBlock")
    replace_all: bool = Field(False, alias="replaceAll")
    include_diff: bool = Field(False, alias="includeDiff")


class LiteralReplaceOperation(_Operation):
    tool: Literal["client_replace_string_in_file"] = "client_replace_string_in_file"
    file_path: str = Field(..., min_length=1, alias="filePath")
    old_string: str = Field(..., alias="oldString")
    new_string: str = Field(..., alias="newString")
    replace_all: bool = Field(False, alias="replaceAll")
    case_insensitive: bool = Field(False, alias="caseInsensitive")
    include_diff: bool = Field(False, alias="includeDiff")


class DeleteOperation(_Operation):
    tool: Literal["delete_file"] = "delete_file"
    path: str = Field(..., min_length=1)


class DeleteFolderOperation(_Operation):
    tool: Literal["delete_folder"] = "delete_folder"
    path: str = Field(..., min_length=1)


class ListOperation(_Operation):
    tool: Literal["list_files"] = "list_files"
    path: Optional[str] = None


class GrepOperation(_Operation):
    tool: Literal["grep_search"] = "grep_search"
    pattern: str
    path: Optional[str] = None
    case_sensitive: bool = Field(False, alias="caseSensitive")


WorkspaceOperation = Annotated[
    Union[
        WriteOperation,
        ReadOperation,
        EditOperation,
        LiteralReplaceOperation,
        DeleteOperation,
        DeleteFolderOperation,
        ListOperation,
        GrepOperation,
    ],
    Field(discriminator="tool"),
]

TOOL_NAMES: tuple[str, ...] = (
    "write_file",
    "read_file",
    "edit_file",
    "client_replace_string_in_file",
    "delete_file",
    "delete_folder",
    "list_files",
    "grep_search",
)

_operation_adapter: TypeAdapter[WorkspaceOperation] = TypeAdapter(WorkspaceOperation)


def parse_operation(name: str, arguments: dict[str, object]) -> WorkspaceOperation:
    """
    Validate raw tool-call arguments into an operation variant.

    Args:
        name: Tool name, used as the variant tag
        arguments: Raw JSON arguments from the caller

    Returns:
        The matching operation model

    Raises:
        InvalidOperationError: If the name is unknown or the arguments are invalid
    """
    if name not in TOOL_NAMES:
        raise InvalidOperationError(f"Unknown tool: {name}")
    try:
        return _operation_adapter.validate_python({**(arguments or {}), "tool": name})
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'][1:]) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidOperationError(f"Invalid arguments for {name}: {problems}")
