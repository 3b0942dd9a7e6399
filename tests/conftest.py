"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from patchspace.adapters.sessions.in_memory_registry import InMemorySessionRegistry
from patchspace.adapters.workspace.in_memory_store import InMemoryWorkspaceStore
from patchspace.container import DependencyContainer
from patchspace.entities.file_record import FileRecord
from patchspace.entities.workspace_session import WorkspaceSession


@pytest.fixture
def temp_directory():
    """
    Create a temporary project directory for snapshot loading.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "README.md"), "w") as f:
            f.write("# Demo\n")

        src = os.path.join(temp_dir, "src")
        os.makedirs(src)
        with open(os.path.join(src, "app.ts"), "w") as f:
            f.write("console.log(1)")

        git_dir = os.path.join(temp_dir, ".git")
        os.makedirs(git_dir)
        with open(os.path.join(git_dir, "HEAD"), "w") as f:
            f.write("ref: refs/heads/main\n")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def session():
    """
    Create a session holding a small TypeScript project.

    Returns:
        WorkspaceSession with src/a.ts, src/b.ts and lib/c.ts
    """
    workspace = WorkspaceSession("test-session")
    workspace.merge_snapshot(
        [
            FileRecord("src/a.ts", "export const a = 1;\n"),
            FileRecord("src/b.ts", "import { a } from './a';\nconsole.log(a);\n"),
            FileRecord("lib/c.ts", "export function c() {\n  return 'Foo';\n}\n"),
        ]
    )
    return workspace


@pytest.fixture
def store(session, mock_logger):
    """
    Create an in-memory store over the shared session fixture.

    Returns:
        InMemoryWorkspaceStore instance
    """
    return InMemoryWorkspaceStore(session, mock_logger)


@pytest.fixture
def registry(mock_logger):
    """
    Create an empty session registry without eviction.

    Returns:
        InMemorySessionRegistry instance
    """
    return InMemorySessionRegistry(logger=mock_logger)


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
