"""
Local file system adapter producing workspace snapshots for the CLI.
"""

import json
import logging
import os
from typing import Any, Iterable, Optional

from patchspace.exceptions import WorkspaceError

SKIP_DIRS = {".git", "node_modules", ".next", "__pycache__", ".venv"}


class LocalSnapshotAdapter:
    """Read a directory tree or a JSON file into snapshot entries."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def load(self, source: str) -> tuple[list[dict[str, Any]], list[str]]:
        """
        Load snapshot entries from a directory or a JSON file.

        A JSON source is either a list of ``{path, content}`` objects or an
        object with ``files`` and optional ``fileTree`` keys.

        Returns:
            (files, file_tree)

        Raises:
            WorkspaceError: If the source is missing or malformed
        """
        if os.path.isdir(source):
            return self._load_directory(source)
        if os.path.isfile(source):
            return self._load_json(source)
        raise WorkspaceError(f"Snapshot source does not exist: {source}")

    def _load_json(self, source: str) -> tuple[list[dict[str, Any]], list[str]]:
        try:
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise WorkspaceError(f"Cannot read snapshot {source}: {e}")
        if isinstance(data, list):
            return data, []
        if isinstance(data, dict) and isinstance(data.get("files"), list):
            return data["files"], list(data.get("fileTree") or [])
        raise WorkspaceError(f"Snapshot {source} must be a list or an object with 'files'")

    def _load_directory(self, root: str) -> tuple[list[dict[str, Any]], list[str]]:
        files: list[dict[str, Any]] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
            for filename in sorted(filenames):
                full = os.path.join(dirpath, filename)
                rel = os.path.relpath(full, root).replace(os.sep, "/")
                try:
                    with open(full, "r", encoding="utf-8") as f:
                        content = f.read()
                except UnicodeDecodeError:
                    # binary files are not part of a text workspace
                    self._logger.warning(f"Skipping non UTF-8 file {rel}")
                    continue
                files.append({"path": rel, "content": content})
        return files, [f["path"] for f in files]

    def _target(self, root: str, path: str) -> Optional[str]:
        # workspace keys may carry ".." segments; never touch anything outside root
        target = os.path.realpath(os.path.join(root, *path.split("/")))
        if target == root or os.path.commonpath([root, target]) != root:
            self._logger.warning(f"Skipping {path}: resolves outside {root}")
            return None
        return target

    def write_back(
        self,
        root: str,
        files: list[dict[str, Any]],
        stale: Iterable[str] = (),
    ) -> int:
        """
        Sync final contents into the directory ``root``.

        Args:
            root: Snapshot directory
            files: Final ``{path, content}`` entries to write
            stale: Snapshot paths the session no longer holds; removed from disk

        Returns:
            Number of files written

        Raises:
            WorkspaceError: If root is not a directory
        """
        if not os.path.isdir(root):
            raise WorkspaceError(f"Write-back target is not a directory: {root}")
        root = os.path.realpath(root)

        written = 0
        for entry in files:
            target = self._target(root, entry["path"])
            if target is None:
                continue
            os.makedirs(os.path.dirname(target), exist_ok=True)
            with open(target, "w", encoding="utf-8") as f:
                f.write(entry["content"])
            written += 1

        for path in stale:
            target = self._target(root, path)
            if target is not None and os.path.isfile(target):
                os.remove(target)
                self._logger.info(f"Removed {path} (deleted in session)")
        return written
