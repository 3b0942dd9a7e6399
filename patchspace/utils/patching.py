"""Text substitution strategies for workspace records.

Two independent entry points:

- ``apply_block_patch`` applies a parsed search/replace block, trying an exact
  substring match first and a whitespace-flexible line-window match second.
- ``apply_literal_replace`` performs a direct string replacement, optionally
  case-insensitive, without any block parsing.

Both mutate the record only on success and always keep ``record.size`` in sync.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from patchspace.entities.patch import MatchStrategy, PatchInstruction, PatchResult
from patchspace.exceptions import InvalidOperationError, SearchTextNotFoundError

if TYPE_CHECKING:
    from patchspace.entities.file_record import FileRecord

SNIPPET_LENGTH = 100

_logger = logging.getLogger(__name__)


def find_flexible_span(content: str, search: str) -> Optional[tuple[int, int]]:
    """Locate ``search`` in ``content`` ignoring per-line outer whitespace.

    Slides a window of ``search``'s line count over ``content``'s lines; the
    first window whose lines all match after ``strip()`` wins.

    Returns:
        ``(start, end)`` character offsets of the untrimmed window, or None
    """
    search_lines = search.split("\n")
    content_lines = content.split("\n")
    window = len(search_lines)

    offset = 0
    for i in range(len(content_lines) - window + 1):
        if all(
            search_lines[j].strip() == content_lines[i + j].strip()
            for j in range(window)
        ):
            matched = "\n".join(content_lines[i : i + window])
            return offset, offset + len(matched)
        offset += len(content_lines[i]) + 1
    return None


def apply_block_patch(
    record: "FileRecord",
    instruction: PatchInstruction,
    replace_all: bool = False,
    resolved_path: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> PatchResult:
    """
    Apply a search/replace instruction to a record.

    Args:
        record: Target file record
        instruction: Parsed search/replace pair
        replace_all: Replace every exact occurrence instead of the first one
        resolved_path: Path to report (defaults to the record path)
        logger: Logger instance to use for logging

    Returns:
        PatchResult describing the applied change

    Raises:
        SearchTextNotFoundError: If neither strategy locates the search text
    """
    log = logger or _logger
    path = resolved_path or record.path
    content = record.content
    search, replace = instruction.search, instruction.replace

    if search == "":
        # pure insertion at the top of the file
        new_content = replace + content
        record.set_content(new_content)
        return PatchResult(path, "edited", MatchStrategy.EXACT, content, new_content)

    if search in content:
        if replace_all:
            count = content.count(search)
            new_content = content.replace(search, replace)
        else:
            count = 1
            new_content = content.replace(search, replace, 1)
        record.set_content(new_content)
        return PatchResult(
            path, "edited", MatchStrategy.EXACT, content, new_content, count
        )

    span = find_flexible_span(content, search)
    if span is not None:
        start, end = span
        new_content = content[:start] + replace + content[end:]
        record.set_content(new_content)
        log.info(f"edit_file: used whitespace-flexible matching for {path}")
        return PatchResult(path, "edited", MatchStrategy.FLEXIBLE, content, new_content)

    raise SearchTextNotFoundError(
        path,
        search[:SNIPPET_LENGTH],
        f"Search string not found in {path} (tried exact and whitespace-flexible matching).",
    )


def apply_literal_replace(
    record: "FileRecord",
    old_string: str,
    new_string: str,
    replace_all: bool = False,
    case_insensitive: bool = False,
    resolved_path: Optional[str] = None,
) -> PatchResult:
    """
    Replace a literal string in a record.

    Case-insensitive matching compares against lowercased copies but always
    slices the original text, so unmatched text keeps its casing.

    Raises:
        InvalidOperationError: If old_string is empty
        SearchTextNotFoundError: If old_string does not occur in the content
    """
    path = resolved_path or record.path
    if old_string == "":
        raise InvalidOperationError("oldString must not be empty")

    content = record.content
    needle = old_string.lower() if case_insensitive else old_string
    haystack = content.lower() if case_insensitive else content

    if needle not in haystack:
        raise SearchTextNotFoundError(
            path, old_string[:SNIPPET_LENGTH], f"String not found in {path}"
        )

    if not case_insensitive:
        strategy = MatchStrategy.LITERAL
        if replace_all:
            count = content.count(old_string)
            new_content = content.replace(old_string, new_string)
        else:
            count = 1
            new_content = content.replace(old_string, new_string, 1)
    else:
        strategy = MatchStrategy.LITERAL_CASE_INSENSITIVE
        if replace_all:
            parts: list[str] = []
            count = 0
            last = 0
            index = haystack.find(needle, last)
            while index != -1:
                parts.append(content[last:index])
                parts.append(new_string)
                last = index + len(old_string)
                count += 1
                index = haystack.find(needle, last)
            parts.append(content[last:])
            new_content = "".join(parts)
        else:
            count = 1
            index = haystack.find(needle)
            new_content = (
                content[:index] + new_string + content[index + len(old_string) :]
            )

    record.set_content(new_content)
    return PatchResult(path, "modified", strategy, content, new_content, count)
