"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from patchspace.container import container
from patchspace.use_cases.files.list_files import ListFilesUseCase
from patchspace.use_cases.sessions.load_snapshot import LoadSnapshotUseCase
from patchspace.use_cases.tools.workspace_tools import WorkspaceToolsHandler


def get_list_files_uc() -> ListFilesUseCase:
    """
    Get the list files use case from the container.

    Returns:
        ListFilesUseCase: The list files use case instance
    """
    return container.get_list_files_use_case()


def get_load_snapshot_uc() -> LoadSnapshotUseCase:
    """
    Get the load snapshot use case from the container.

    Returns:
        LoadSnapshotUseCase: The load snapshot use case instance
    """
    return container.get_load_snapshot_use_case()


def get_tools_handler(session_id: str) -> WorkspaceToolsHandler:
    """
    Get a workspace tools handler bound to a session.

    Returns:
        WorkspaceToolsHandler: Handler for the session's tools
    """
    return container.get_workspace_tools_handler(session_id)
