"""
Pydantic models for API requests and responses.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from patchspace.entities.file_record import FileRecord
from patchspace.entities.patch import DiffLine


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class FileInfo(BaseModel):
    """Schema for file information."""

    path: str = Field(..., description="Normalized workspace path")
    type: str = Field(..., description="'file' or 'directory'")
    size: int = Field(..., description="Content length in characters")

    @classmethod
    def from_entity(cls, record: FileRecord):
        """Create a FileInfo schema from a FileRecord entity."""
        return cls(**record.list_entry())


class FileListResponse(BaseModel):
    """Schema for file list response."""

    files: List[FileInfo] = Field(..., description="List of files")
    count: int = Field(..., description="Number of files")


class SnapshotFile(_CamelModel):
    """One file of a client snapshot."""

    path: str = Field(..., description="File path")
    content: Optional[str] = Field(None, description="Full file content")
    name: Optional[str] = Field(None, description="Display name (informational)")
    type: Optional[str] = Field(None, description="File kind (informational)")
    is_directory: bool = Field(False, alias="isDirectory")


class SnapshotRequest(_CamelModel):
    """Schema for seeding or merging a session snapshot."""

    files: List[SnapshotFile] = Field(default_factory=list)
    file_tree: List[str] = Field(default_factory=list, alias="fileTree")


class SessionInfo(_CamelModel):
    """Schema describing a session after a snapshot merge."""

    session_id: str = Field(..., alias="sessionId")
    file_count: int = Field(..., alias="fileCount")
    tree_size: int = Field(..., alias="treeSize")


class ProjectContextResponse(_CamelModel):
    session_id: str = Field(..., alias="sessionId")
    context: str = Field(..., description="Markdown file listing")


class ToolSpecSchema(BaseModel):
    """Schema for a tool specification."""

    name: str
    description: str
    parameters: dict[str, Any]


class DiffRequest(_CamelModel):
    """Schema for a line diff request."""

    old_text: str = Field("", alias="oldText")
    new_text: str = Field("", alias="newText")


class DiffLineSchema(_CamelModel):
    type: str = Field(..., description="context, add or remove")
    content: str
    old_line_number: Optional[int] = Field(None, alias="oldLineNumber")
    new_line_number: Optional[int] = Field(None, alias="newLineNumber")

    @classmethod
    def from_entity(cls, line: DiffLine):
        return cls(**line.to_dict())


class DiffResponse(BaseModel):
    """Schema for a line diff response."""

    lines: List[DiffLineSchema] = Field(default_factory=list)
    additions: int
    removals: int
    unified: str = Field(..., description="Numbered unified rendering")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
