"""
Use case for searching file contents in a session workspace.
"""

import logging
from typing import Optional

from patchspace.entities.results import GrepResult
from patchspace.exceptions import WorkspaceError
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort


class GrepSearchUseCase:
    """Use case for regex search across the files of a session."""

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
        pattern: str,
        path: Optional[str] = None,
        case_sensitive: bool = False,
    ) -> GrepResult:
        """
        Search every file line for a regular expression.

        Args:
            session_id: Session identifier
            pattern: Regular expression
            path: Optional path prefix restricting the search
            case_sensitive: Match case exactly (default False)

        Returns:
            GrepResult with capped matches and the true match count

        Raises:
            InvalidRegexPatternError: If the pattern does not compile
            WorkspaceError: If the search fails
        """
        try:
            self._logger.info(
                f"Searching for pattern '{pattern}' in directory: {path or '/'}"
            )
            result = self._registry.get_store(session_id).grep(
                pattern, path, case_sensitive
            )
            self._logger.info(
                f"Found {result.total_matches} matches for pattern '{pattern}'"
            )
            return result
        except WorkspaceError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching files: {e}")
            raise WorkspaceError(
                f"Failed to search files in {path} with pattern {pattern}: {str(e)}"
            )
