"""
Session registry port: owner of every live workspace session.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from patchspace.entities.workspace_session import WorkspaceSession
from patchspace.ports.workspace.workspace_store_port import WorkspaceStorePort


class SessionRegistryPort(ABC):
    """Port interface for looking up and seeding workspace sessions."""

    @abstractmethod
    def get(self, session_id: str) -> Optional[WorkspaceSession]:
        """Return the session if it exists, without creating it."""
        pass

    @abstractmethod
    def get_or_create(self, session_id: str) -> WorkspaceSession:
        """Return the session, creating an empty one on first use."""
        pass

    @abstractmethod
    def get_store(self, session_id: str) -> WorkspaceStorePort:
        """Return the file store bound to the (possibly new) session."""
        pass

    @abstractmethod
    def load_snapshot(
        self,
        session_id: str,
        files: Iterable[dict[str, Any]],
        file_tree: Optional[list[str]] = None,
    ) -> WorkspaceSession:
        """
        Merge a file snapshot into a session, creating it if needed.

        Args:
            session_id: Session identifier
            files: Snapshot entries with at least ``path`` and ``content``
            file_tree: Optional display tree

        Returns:
            The updated session
        """
        pass

    @abstractmethod
    def remove(self, session_id: str) -> bool:
        """Drop a session. Returns True if it existed."""
        pass

    @abstractmethod
    def session_ids(self) -> list[str]:
        pass
