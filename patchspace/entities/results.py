"""
Result values returned by the workspace store.
"""

from dataclasses import dataclass, field
from typing import Optional

from patchspace.entities.file_record import FileRecord


@dataclass(frozen=True)
class WriteResult:
    record: FileRecord
    path: str
    action: str  # "created" | "updated"


@dataclass(frozen=True)
class ReadResult:
    path: str
    content: str
    total_lines: int
    truncated: bool = False
    message: Optional[str] = None


@dataclass(frozen=True)
class DeleteResult:
    path: str
    deleted: list[str] = field(default_factory=list)

    @property
    def files_deleted(self) -> int:
        return len(self.deleted)


@dataclass(frozen=True)
class GrepMatch:
    file_path: str
    line_number: int
    line_content: str


@dataclass(frozen=True)
class GrepResult:
    matches: list[GrepMatch]
    total_matches: int
