"""
In-memory session registry owned by the host application.
"""

import logging
import threading
from typing import Any, Iterable, Optional

from typing_extensions import override

from patchspace.adapters.sessions.eviction import NoEvictionPolicy
from patchspace.adapters.workspace.in_memory_store import InMemoryWorkspaceStore
from patchspace.entities.file_record import FileRecord
from patchspace.entities.workspace_session import WorkspaceSession
from patchspace.exceptions import WorkspaceError
from patchspace.ports.sessions.eviction_policy_port import EvictionPolicyPort
from patchspace.ports.sessions.session_registry_port import SessionRegistryPort
from patchspace.utils.paths import normalize_path


class InMemorySessionRegistry(SessionRegistryPort):
    """Process-local table of sessions with a pluggable eviction policy."""

    def __init__(
        self,
        policy: Optional[EvictionPolicyPort] = None,
        logger: Optional[logging.Logger] = None,
        **store_options: Any,
    ):
        """
        Initialize the registry.

        Args:
            policy: Eviction policy; defaults to never evicting
            logger: Logger instance to use for logging
            **store_options: Keyword arguments forwarded to each InMemoryWorkspaceStore
        """
        self._policy = policy or NoEvictionPolicy()
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._store_options = store_options
        self._sessions: dict[str, WorkspaceSession] = {}
        self._lock = threading.Lock()

    def _evict(self, keep: str) -> None:
        victims = self._policy.select_victims(list(self._sessions))
        for session_id in victims:
            if session_id == keep:
                continue
            self._sessions.pop(session_id, None)
            self._policy.forget(session_id)
            self._logger.info(f"Evicted workspace session: {session_id}")

    @override
    def get(self, session_id: str) -> Optional[WorkspaceSession]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._policy.touch(session_id)
            return session

    @override
    def get_or_create(self, session_id: str) -> WorkspaceSession:
        if not session_id:
            raise WorkspaceError("Session id must be a non-empty string")
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                session = WorkspaceSession(session_id)
                self._sessions[session_id] = session
                self._logger.info(f"Created workspace session: {session_id}")
            self._policy.touch(session_id)
            self._evict(keep=session_id)
            return session

    @override
    def get_store(self, session_id: str) -> InMemoryWorkspaceStore:
        session = self.get_or_create(session_id)
        return InMemoryWorkspaceStore(session, self._logger, **self._store_options)

    @override
    def load_snapshot(
        self,
        session_id: str,
        files: Iterable[dict[str, Any]],
        file_tree: Optional[list[str]] = None,
    ) -> WorkspaceSession:
        records: list[FileRecord] = []
        for entry in files:
            path = entry.get("path")
            if not path or entry.get("isDirectory") or entry.get("is_directory"):
                continue
            if not normalize_path(str(path)):
                continue
            content = entry.get("content")
            records.append(FileRecord(path, "" if content is None else str(content)))

        session = self.get_or_create(session_id)
        written = session.merge_snapshot(records, file_tree)
        self._logger.info(
            f"Merged snapshot into session {session_id}: {written} files"
        )
        return session

    @override
    def remove(self, session_id: str) -> bool:
        with self._lock:
            existed = self._sessions.pop(session_id, None) is not None
            self._policy.forget(session_id)
            return existed

    @override
    def session_ids(self) -> list[str]:
        with self._lock:
            return list(self._sessions)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
