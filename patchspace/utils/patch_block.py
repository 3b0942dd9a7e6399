"""Parser for ``<<<<<<< SEARCH / ======= / >>>>>>> REPLACE`` edit blocks."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from patchspace.entities.patch import PatchInstruction

SEARCH_START = "<<<<<<< SEARCH"
DIVIDER = "======="
REPLACE_END = ">>>>>>> REPLACE"


class _ScanState(Enum):
    NONE = "none"
    SEARCHING = "searching"
    REPLACING = "replacing"


def parse_patch_block(block: str) -> Optional[PatchInstruction]:
    """
    Parse a search/replace block into a PatchInstruction.

    Markers are matched as whole lines after stripping surrounding whitespace,
    and only in the state where they are meaningful, so payload lines that look
    like a divider are kept as content. Anything after the closing marker is
    ignored.

    Args:
        block: Raw block text

    Returns:
        The parsed instruction, or None if both search and replace are blank
    """
    search_lines: list[str] = []
    replace_lines: list[str] = []
    state = _ScanState.NONE

    for line in (block or "").split("\n"):
        marker = line.strip()
        if marker == SEARCH_START and state is _ScanState.NONE:
            state = _ScanState.SEARCHING
        elif marker == DIVIDER and state is _ScanState.SEARCHING:
            state = _ScanState.REPLACING
        elif marker == REPLACE_END and state is _ScanState.REPLACING:
            break
        elif state is _ScanState.SEARCHING:
            search_lines.append(line)
        elif state is _ScanState.REPLACING:
            replace_lines.append(line)

    has_search = any(line.strip() for line in search_lines)
    has_replace = any(line.strip() for line in replace_lines)
    if not has_search and not has_replace:
        return None

    return PatchInstruction(
        search="\n".join(search_lines), replace="\n".join(replace_lines)
    )
