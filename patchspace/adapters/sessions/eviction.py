"""
Eviction policies for the in-memory session registry.
"""

import time
from collections import OrderedDict
from collections.abc import Iterable
from typing import Callable, Optional

from typing_extensions import override

from patchspace.exceptions import ConfigurationError
from patchspace.ports.sessions.eviction_policy_port import EvictionPolicyPort


class NoEvictionPolicy(EvictionPolicyPort):
    """Keep every session until it is removed explicitly."""

    @override
    def touch(self, session_id: str) -> None:
        pass

    @override
    def forget(self, session_id: str) -> None:
        pass

    @override
    def select_victims(self, session_ids: Iterable[str]) -> list[str]:
        return []


class LRUEvictionPolicy(EvictionPolicyPort):
    """Keep at most ``max_sessions`` sessions, dropping the least recently used."""

    def __init__(self, max_sessions: int):
        if max_sessions < 1:
            raise ConfigurationError("max_sessions must be at least 1")
        self.max_sessions = max_sessions
        self._order: "OrderedDict[str, None]" = OrderedDict()

    @override
    def touch(self, session_id: str) -> None:
        self._order[session_id] = None
        self._order.move_to_end(session_id)

    @override
    def forget(self, session_id: str) -> None:
        self._order.pop(session_id, None)

    @override
    def select_victims(self, session_ids: Iterable[str]) -> list[str]:
        live = set(session_ids)
        # sessions never touched count as oldest
        untracked = [sid for sid in live if sid not in self._order]
        ordered = untracked + [sid for sid in self._order if sid in live]
        excess = len(ordered) - self.max_sessions
        return ordered[:excess] if excess > 0 else []


class TTLEvictionPolicy(EvictionPolicyPort):
    """Drop sessions idle for longer than ``ttl_seconds``."""

    def __init__(
        self, ttl_seconds: float, clock: Optional[Callable[[], float]] = None
    ):
        if ttl_seconds <= 0:
            raise ConfigurationError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock or time.monotonic
        self._last_seen: dict[str, float] = {}

    @override
    def touch(self, session_id: str) -> None:
        self._last_seen[session_id] = self._clock()

    @override
    def forget(self, session_id: str) -> None:
        self._last_seen.pop(session_id, None)

    @override
    def select_victims(self, session_ids: Iterable[str]) -> list[str]:
        now = self._clock()
        return [
            sid
            for sid in session_ids
            if sid in self._last_seen and now - self._last_seen[sid] > self.ttl_seconds
        ]


def build_eviction_policy(
    name: str,
    max_sessions: Optional[int] = None,
    ttl_seconds: Optional[float] = None,
) -> EvictionPolicyPort:
    """Build a policy from its configuration name ("none", "lru" or "ttl")."""
    if name == "none":
        return NoEvictionPolicy()
    if name == "lru":
        if not max_sessions:
            raise ConfigurationError("LRU eviction requires max_sessions")
        return LRUEvictionPolicy(max_sessions)
    if name == "ttl":
        if not ttl_seconds:
            raise ConfigurationError("TTL eviction requires ttl_seconds")
        return TTLEvictionPolicy(ttl_seconds)
    raise ConfigurationError(f"Unknown eviction policy: {name}")
