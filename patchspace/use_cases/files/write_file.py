"""
Use case for creating or overwriting a workspace file.
"""

import logging
from typing import Optional

from patchspace.entities.results import WriteResult
from patchspace.exceptions import WorkspaceError
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort


class WriteFileUseCase:
    """Use case for writing a file into a session workspace."""

    def __init__(
        self,
        registry: SessionRegistryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            registry: Registry owning the workspace sessions
            logger: Logger instance to use for logging
        """
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session_id: str, path: str, content: str) -> WriteResult:
        """
        Write full content to a file, creating it if the path does not resolve.

        Args:
            session_id: Session identifier
            path: Target path (may be imprecise)
            content: Full file content

        Returns:
            WriteResult with the resolved path and "created"/"updated" action

        Raises:
            WorkspaceError: If writing fails
        """
        try:
            self._logger.info(f"Writing file {path} in session {session_id}")
            result = self._registry.get_store(session_id).write(path, content)
            self._logger.info(f"File {result.path} {result.action}")
            return result
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error writing file: {e}")
            raise WorkspaceError(f"Failed to write file {path}: {str(e)}")
