"""Workspace path utilities: normalization and fuzzy resolution.

Agents rarely quote a path exactly the way the session stores it ("./src/app.ts",
"/src//app.ts", "app.ts"), so lookups go through ``resolve_path`` which tries a
fixed sequence of strategies and only accepts an unambiguous answer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Optional

if TYPE_CHECKING:
    from patchspace.entities.file_record import FileRecord

_SEPARATOR_RUN = re.compile(r"/+")


def normalize_path(raw: str) -> str:
    """Canonicalize a workspace path.

    Leading ``./`` and ``/`` are stripped (in any interleaving), runs of ``/``
    collapse to one and a trailing ``/`` is dropped. Total and idempotent.
    """
    normalized = raw or ""
    while True:
        if normalized.startswith("./"):
            normalized = normalized[2:]
        elif normalized.startswith("/"):
            normalized = normalized[1:]
        else:
            break
    normalized = _SEPARATOR_RUN.sub("/", normalized)
    if normalized.endswith("/") and len(normalized) > 1:
        normalized = normalized[:-1]
    return normalized


def basename(path: str) -> str:
    """Final path segment, or the path itself when that segment is empty."""
    return path.split("/")[-1] or path


@dataclass(frozen=True)
class ResolvedPath:
    record: "FileRecord"
    resolved_path: str


def resolve_path(
    files: Mapping[str, "FileRecord"], input_path: str
) -> Optional[ResolvedPath]:
    """Map an agent-supplied path to a stored record.

    Strategies, first unique hit wins:
      1. exact key
      2. normalized key
      3. first stored key whose normalized form equals the normalized input
      4. unique basename among non-directory records
      5. unique suffix (``key == p`` or ``key.endswith("/" + p)``) among
         non-directory records

    Returns None when nothing matches or when a match is ambiguous.
    """
    record = files.get(input_path)
    if record is not None:
        return ResolvedPath(record, input_path)

    normalized = normalize_path(input_path)
    record = files.get(normalized)
    if record is not None:
        return ResolvedPath(record, normalized)

    for stored_path, stored in files.items():
        if normalize_path(stored_path) == normalized:
            return ResolvedPath(stored, stored_path)

    name = basename(input_path)
    by_name = [
        (stored_path, stored)
        for stored_path, stored in files.items()
        if not stored.is_directory and basename(stored_path) == name
    ]
    if len(by_name) == 1:
        return ResolvedPath(by_name[0][1], by_name[0][0])

    by_suffix = [
        (stored_path, stored)
        for stored_path, stored in files.items()
        if not stored.is_directory
        and (stored_path == normalized or stored_path.endswith("/" + normalized))
    ]
    if len(by_suffix) == 1:
        return ResolvedPath(by_suffix[0][1], by_suffix[0][0])

    return None


def suggest_paths(
    files: Mapping[str, "FileRecord"], input_path: str, limit: int = 3
) -> list[str]:
    """Candidate paths for a "did you mean" message. Never applied automatically."""
    normalized = normalize_path(input_path)
    name = basename(input_path)
    suggestions: list[str] = []
    for stored_path in files:
        stored_name = basename(stored_path)
        if (
            stored_name == name
            or normalized in stored_path
            or stored_name in normalized
        ):
            suggestions.append(stored_path)
            if len(suggestions) >= limit:
                break
    return suggestions
