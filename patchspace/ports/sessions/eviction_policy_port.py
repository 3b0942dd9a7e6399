"""
Eviction policy port deciding which workspace sessions to drop.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable


class EvictionPolicyPort(ABC):
    """Port interface for session eviction strategies."""

    @abstractmethod
    def touch(self, session_id: str) -> None:
        """
        Record an access to a session.

        Args:
            session_id: Identifier of the accessed session
        """
        pass

    @abstractmethod
    def forget(self, session_id: str) -> None:
        """Drop any bookkeeping kept for a removed session."""
        pass

    @abstractmethod
    def select_victims(self, session_ids: Iterable[str]) -> list[str]:
        """
        Choose the sessions that should be evicted now.

        Args:
            session_ids: Identifiers of all live sessions

        Returns:
            Identifiers to evict (possibly empty)
        """
        pass
