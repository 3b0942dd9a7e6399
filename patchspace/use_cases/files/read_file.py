"""
Use case for reading a workspace file.
"""

import logging
from typing import Optional

from patchspace.entities.results import ReadResult
from patchspace.exceptions import WorkspaceError
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort


class ReadFileUseCase:
    """Use case for reading a file, whole or by line range."""

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
        path: str,
        start_line: Optional[int] = None,
        end_line: Optional[int] = None,
    ) -> ReadResult:
        """
        Read a file from the session workspace.

        Args:
            session_id: Session identifier
            path: File path (may be imprecise)
            start_line: Optional 1-based first line
            end_line: Optional 1-based last line (inclusive, clamped)

        Returns:
            ReadResult; un-ranged reads of long files come back truncated

        Raises:
            PathNotFoundError: If the path cannot be resolved
            WorkspaceError: If reading fails
        """
        try:
            self._logger.info(f"Reading file {path} in session {session_id}")
            result = self._registry.get_store(session_id).read(path, start_line, end_line)
            if result.truncated:
                self._logger.info(
                    f"Read of {result.path} truncated ({result.total_lines} lines)"
                )
            return result
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise WorkspaceError(f"Failed to read file {path}: {str(e)}")
