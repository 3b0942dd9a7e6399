"""Line-level diff via longest common subsequence.

The backtrack prefers an ``add`` over a ``remove`` when both directions keep the
same LCS length; this fixes the exact shape of the produced diff.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from patchspace.entities.patch import DiffLine, DiffLineType, DiffSummary


def _split_lines(text: str) -> list[str]:
    # empty text has no lines, not one empty line
    return text.split("\n") if text else []


def lcs_table(old_lines: list[str], new_lines: list[str]) -> list[list[int]]:
    """``table[i][j]`` is the LCS length of ``old_lines[:i]`` and ``new_lines[:j]``."""
    m, n = len(old_lines), len(new_lines)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if old_lines[i - 1] == new_lines[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])
    return table


def diff_lines(old_text: str, new_text: str) -> Iterator[DiffLine]:
    """
    Compute the line diff between two texts.

    Args:
        old_text: Text before the change
        new_text: Text after the change

    Returns:
        A single-pass iterator of DiffLine in forward order
    """
    old_lines = _split_lines(old_text)
    new_lines = _split_lines(new_text)
    table = lcs_table(old_lines, new_lines)

    script: list[tuple[DiffLineType, str]] = []
    i, j = len(old_lines), len(new_lines)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and old_lines[i - 1] == new_lines[j - 1]:
            script.append((DiffLineType.CONTEXT, old_lines[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            script.append((DiffLineType.ADD, new_lines[j - 1]))
            j -= 1
        else:
            script.append((DiffLineType.REMOVE, old_lines[i - 1]))
            i -= 1
    script.reverse()

    return _number_lines(script)


def _number_lines(script: list[tuple[DiffLineType, str]]) -> Iterator[DiffLine]:
    old_number, new_number = 1, 1
    for line_type, content in script:
        if line_type is DiffLineType.CONTEXT:
            yield DiffLine(line_type, content, old_number, new_number)
            old_number += 1
            new_number += 1
        elif line_type is DiffLineType.REMOVE:
            yield DiffLine(line_type, content, old_line_number=old_number)
            old_number += 1
        else:
            yield DiffLine(line_type, content, new_line_number=new_number)
            new_number += 1


def summarize_diff(lines: Iterable[DiffLine]) -> DiffSummary:
    additions = removals = 0
    for line in lines:
        if line.type is DiffLineType.ADD:
            additions += 1
        elif line.type is DiffLineType.REMOVE:
            removals += 1
    return DiffSummary(additions=additions, removals=removals)


_PREFIX = {
    DiffLineType.CONTEXT: " ",
    DiffLineType.ADD: "+",
    DiffLineType.REMOVE: "-",
}


def render_unified(lines: Iterable[DiffLine], path: Optional[str] = None) -> str:
    """Render diff lines as numbered unified text with a ``+N -M`` header."""
    lines = list(lines)
    summary = summarize_diff(lines)
    header = f"+{summary.additions} -{summary.removals}"
    if path:
        header = f"{path} {header}"

    width = max(
        [len(str(n)) for line in lines for n in (line.old_line_number, line.new_line_number) if n]
        or [1]
    )
    out = [header]
    for line in lines:
        old = str(line.old_line_number or "").rjust(width)
        new = str(line.new_line_number or "").rjust(width)
        out.append(f"{old} {new} {_PREFIX[line.type]}{line.content}")
    return "\n".join(out)
