"""
Use cases for seeding sessions and building their prompt context.
"""

import logging
from typing import Any, Iterable, Optional

from patchspace.entities.workspace_session import WorkspaceSession
from patchspace.exceptions import WorkspaceError
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort


class LoadSnapshotUseCase:
    """Use case for merging a client file snapshot into a session."""

    def __init__(
        self,
        registry: SessionRegistryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self,
        session_id: str,
        files: Iterable[dict[str, Any]],
        file_tree: Optional[list[str]] = None,
    ) -> WorkspaceSession:
        """
        Merge a snapshot; files missing from it are kept, never dropped.

        Raises:
            WorkspaceError: If the snapshot cannot be merged
        """
        try:
            self._logger.info(f"Loading snapshot into session {session_id}")
            return self._registry.load_snapshot(session_id, files, file_tree)
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error loading snapshot: {e}")
            raise WorkspaceError(
                f"Failed to load snapshot into session {session_id}: {str(e)}"
            )

    def project_context(self, session_id: str) -> str:
        """Markdown file listing for the session, empty if it does not exist."""
        session = self._registry.get(session_id)
        if session is None:
            return ""
        return session.project_context()
