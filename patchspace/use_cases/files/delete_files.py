"""
Use cases for deleting workspace files and folders.
"""

import logging
from typing import Optional

from patchspace.entities.results import DeleteResult
from patchspace.exceptions import WorkspaceError
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort


class DeleteFileUseCase:
    """Use case for deleting a single file."""

    def __init__(
        self,
        registry: SessionRegistryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session_id: str, path: str) -> DeleteResult:
        """
        Delete the file a path resolves to.

        Raises:
            PathNotFoundError: If the path cannot be resolved
        """
        try:
            self._logger.info(f"Deleting file {path} in session {session_id}")
            result = self._registry.get_store(session_id).delete(path)
            self._logger.info(f"File {result.path} deleted")
            return result
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting file: {e}")
            raise WorkspaceError(f"Failed to delete file {path}: {str(e)}")


class DeleteFolderUseCase:
    """Use case for deleting every file under a folder prefix."""

    def __init__(
        self,
        registry: SessionRegistryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._registry = registry
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session_id: str, path: str) -> DeleteResult:
        """
        Delete a folder and everything below it.

        Raises:
            PathNotFoundError: If no file lives under the folder
        """
        try:
            self._logger.info(f"Deleting folder {path} in session {session_id}")
            result = self._registry.get_store(session_id).delete_by_prefix(path)
            self._logger.info(f"Folder {path} deleted ({result.files_deleted} files)")
            return result
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting folder: {e}")
            raise WorkspaceError(f"Failed to delete folder {path}: {str(e)}")
