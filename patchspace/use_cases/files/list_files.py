"""
Use case for listing files in a session workspace.
"""

import logging
from typing import Optional

from patchspace.entities.file_record import FileRecord
from patchspace.exceptions import WorkspaceError
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort


class ListFilesUseCase:
    """Use case for listing files in a session workspace."""

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

    def execute(self, session_id: str, directory: Optional[str] = None) -> list[FileRecord]:
        """
        List all records under a directory prefix.

        Args:
            session_id: Session identifier
            directory: Directory prefix; None lists everything

        Returns:
            List of FileRecord entities

        Raises:
            WorkspaceError: If listing fails
        """
        try:
            self._logger.info(f"Listing files in directory: {directory or '/'}")
            files = self._registry.get_store(session_id).list(directory)
            self._logger.info(f"Found {len(files)} files")
            return files
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing files: {e}")
            raise WorkspaceError(f"Failed to list files in {directory}: {str(e)}")
