"""
Use cases for patching workspace files.
"""

import logging
from typing import Optional

from patchspace.entities.patch import PatchResult
from patchspace.exceptions import WorkspaceError
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort


class EditFileUseCase:
    """Use case for applying a search/replace block to a file."""

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

    def execute(
        self,
        session_id: str,
        file_path: str,
        search_replace_block: str,
        replace_all: bool = False,
    ) -> PatchResult:
        """
        Apply a ``<<<<<<< SEARCH / ======= / >>>>>>> REPLACE`` block.

        Args:
            session_id: Session identifier
            file_path: Target file path (may be imprecise)
            search_replace_block: Raw block text
            replace_all: Replace every exact occurrence

        Returns:
            PatchResult describing the change

        Raises:
            PathNotFoundError: If the path cannot be resolved
            InvalidPatchFormatError: If the block cannot be parsed
            SearchTextNotFoundError: If the search text is not in the file
        """
        try:
            self._logger.info(f"Editing file {file_path} in session {session_id}")
            store = self._registry.get_store(session_id)
            result = store.edit(file_path, search_replace_block, replace_all)
            self._logger.info(
                f"File {result.resolved_path} edited ({result.strategy.value} match)"
            )
            return result
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error editing file: {e}")
            raise WorkspaceError(f"Failed to edit file {file_path}: {str(e)}")


class ReplaceStringUseCase:
    """Use case for a direct literal string replacement."""

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
        file_path: str,
        old_string: str,
        new_string: str,
        replace_all: bool = False,
        case_insensitive: bool = False,
    ) -> PatchResult:
        """
        Replace ``old_string`` with ``new_string`` in a file.

        Raises:
            PathNotFoundError: If the path cannot be resolved
            SearchTextNotFoundError: If old_string does not occur
        """
        try:
            self._logger.info(
                f"Replacing string in {file_path} in session {session_id}"
            )
            store = self._registry.get_store(session_id)
            result = store.replace_string(
                file_path, old_string, new_string, replace_all, case_insensitive
            )
            self._logger.info(
                f"File {result.resolved_path} modified ({result.replacements} replacements)"
            )
            return result
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error replacing string: {e}")
            raise WorkspaceError(f"Failed to modify file {file_path}: {str(e)}")
