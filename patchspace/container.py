"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from patchspace.adapters.sessions.eviction import build_eviction_policy
from patchspace.adapters.sessions.in_memory_registry import InMemorySessionRegistry
from patchspace.config.settings import Settings
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort
from patchspace.use_cases.files.delete_files import (
    DeleteFileUseCase,
    DeleteFolderUseCase,
)
from patchspace.use_cases.files.edit_file import EditFileUseCase, ReplaceStringUseCase
from patchspace.use_cases.files.list_files import ListFilesUseCase
from patchspace.use_cases.files.read_file import ReadFileUseCase
from patchspace.use_cases.files.search_files import GrepSearchUseCase
from patchspace.use_cases.files.write_file import WriteFileUseCase
from patchspace.use_cases.sessions.load_snapshot import LoadSnapshotUseCase
from patchspace.use_cases.tools.workspace_tools import WorkspaceToolsHandler


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._instances = {}
        self._settings = settings
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """Get the settings, read from the environment on first use."""
        if self._settings is None:
            from patchspace.config.settings import settings

            self._settings = settings
        return self._settings

    def get_session_registry(self) -> SessionRegistryPort:
        """
        Get the session registry instance.

        Returns:
            SessionRegistryPort implementation
        """
        if "session_registry" not in self._instances:
            cfg = self.get_settings()
            policy = build_eviction_policy(
                cfg.eviction_policy, cfg.max_sessions, cfg.session_ttl_seconds
            )
            self._instances["session_registry"] = InMemorySessionRegistry(
                policy,
                self._logger,
                read_max_lines=cfg.read_max_lines,
                grep_max_results=cfg.grep_max_results,
                grep_line_max_chars=cfg.grep_line_max_chars,
                suggestion_limit=cfg.suggestion_limit,
            )
        return self._instances["session_registry"]

    def _use_case(self, key: str, factory):
        if key not in self._instances:
            self._instances[key] = factory(self.get_session_registry(), self._logger)
        return self._instances[key]

    def get_write_file_use_case(self) -> WriteFileUseCase:
        return self._use_case("write_file_use_case", WriteFileUseCase)

    def get_read_file_use_case(self) -> ReadFileUseCase:
        return self._use_case("read_file_use_case", ReadFileUseCase)

    def get_edit_file_use_case(self) -> EditFileUseCase:
        return self._use_case("edit_file_use_case", EditFileUseCase)

    def get_replace_string_use_case(self) -> ReplaceStringUseCase:
        return self._use_case("replace_string_use_case", ReplaceStringUseCase)

    def get_delete_file_use_case(self) -> DeleteFileUseCase:
        return self._use_case("delete_file_use_case", DeleteFileUseCase)

    def get_delete_folder_use_case(self) -> DeleteFolderUseCase:
        return self._use_case("delete_folder_use_case", DeleteFolderUseCase)

    def get_list_files_use_case(self) -> ListFilesUseCase:
        """
        Get list files use case with injected dependencies.

        Returns:
            Configured ListFilesUseCase
        """
        return self._use_case("list_files_use_case", ListFilesUseCase)

    def get_grep_search_use_case(self) -> GrepSearchUseCase:
        """
        Get grep search use case with injected dependencies.

        Returns:
            Configured GrepSearchUseCase
        """
        return self._use_case("grep_search_use_case", GrepSearchUseCase)

    def get_load_snapshot_use_case(self) -> LoadSnapshotUseCase:
        return self._use_case("load_snapshot_use_case", LoadSnapshotUseCase)

    def get_workspace_tools_handler(self, session_id: str) -> WorkspaceToolsHandler:
        """
        Tools handler bound to one session. Built per call, use cases are shared.
        """
        return WorkspaceToolsHandler(
            session_id,
            self.get_write_file_use_case(),
            self.get_read_file_use_case(),
            self.get_edit_file_use_case(),
            self.get_replace_string_use_case(),
            self.get_delete_file_use_case(),
            self.get_delete_folder_use_case(),
            self.get_list_files_use_case(),
            self.get_grep_search_use_case(),
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
