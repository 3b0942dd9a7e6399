"""
Workspace session domain entity.
"""

import threading
from typing import Any, Iterable, Optional

from patchspace.entities.file_record import FileRecord

CONTEXT_EXCLUDES = ("node_modules", ".git/", ".next/")


class WorkspaceSession:
    """
    Container for one logical project: its file records and display tree.

    Every mutation of ``files`` must happen while holding ``lock``; there is
    one lock per session.
    """

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.files: dict[str, FileRecord] = {}
        self.file_tree: list[str] = []
        self.lock = threading.RLock()

    def merge_snapshot(
        self, records: Iterable[FileRecord], file_tree: Optional[list[str]] = None
    ) -> int:
        """
        Merge an initial file snapshot into the session.

        Incoming paths overwrite existing records; existing paths that the
        snapshot does not mention are kept. Directory entries are skipped.

        Returns:
            Number of records written
        """
        written = 0
        with self.lock:
            for record in records:
                if record.is_directory:
                    continue
                self.files[record.path] = record
                written += 1
            if file_tree:
                self.file_tree = list(file_tree)
        return written

    def project_context(self, tree_limit: int = 200) -> str:
        """Markdown listing of the project's files for prompt building."""
        with self.lock:
            visible = [
                record.path
                for record in self.files.values()
                if not record.is_directory
                and not any(x in record.path.lower() for x in CONTEXT_EXCLUDES)
            ]
            tree = self.file_tree[:tree_limit] if self.file_tree else visible
        listing = "\n".join(tree)
        return f"# Project Files\n```\n{listing}\n```\n\nTotal files: {len(visible)}"

    def get_details(self) -> dict[str, Any]:
        with self.lock:
            return {
                "sessionId": self.session_id,
                "fileCount": sum(1 for r in self.files.values() if not r.is_directory),
                "treeSize": len(self.file_tree),
            }

    def __repr__(self) -> str:
        return f"WorkspaceSession(session_id='{self.session_id}', files={len(self.files)})"
