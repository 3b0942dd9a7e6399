"""
Value objects produced while patching and diffing workspace files.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class PatchInstruction:
    """Parsed search/replace pair. Either side may be empty, not both blank."""

    search: str
    replace: str


class MatchStrategy(str, Enum):
    EXACT = "exact"
    FLEXIBLE = "flexible"
    LITERAL = "literal"
    LITERAL_CASE_INSENSITIVE = "literal_case_insensitive"


@dataclass(frozen=True)
class PatchResult:
    """Outcome of a successful patch application."""

    resolved_path: str
    action: str
    strategy: MatchStrategy
    old_content: str
    new_content: str
    replacements: int = 1

    @property
    def flexible_match(self) -> bool:
        return self.strategy is MatchStrategy.FLEXIBLE


class DiffLineType(str, Enum):
    CONTEXT = "context"
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class DiffLine:
    """One line of a line-level diff with its running line numbers."""

    type: DiffLineType
    content: str
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": self.type.value, "content": self.content}
        if self.old_line_number is not None:
            data["oldLineNumber"] = self.old_line_number
        if self.new_line_number is not None:
            data["newLineNumber"] = self.new_line_number
        return data


@dataclass(frozen=True)
class DiffSummary:
    additions: int
    removals: int
