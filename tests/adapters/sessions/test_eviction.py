"""
Tests for the session eviction policies.
"""

import pytest

from patchspace.adapters.sessions.eviction import (
    LRUEvictionPolicy,
    NoEvictionPolicy,
    TTLEvictionPolicy,
    build_eviction_policy,
)
from patchspace.exceptions import ConfigurationError


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestLRUEvictionPolicy:
    """Test cases for the LRU policy."""

    def test_selects_least_recently_used(self):
        policy = LRUEvictionPolicy(2)
        for sid in ("a", "b", "c"):
            policy.touch(sid)

        assert policy.select_victims(["a", "b", "c"]) == ["a"]

    def test_touch_refreshes(self):
        policy = LRUEvictionPolicy(2)
        for sid in ("a", "b", "c", "a"):
            policy.touch(sid)

        assert policy.select_victims(["a", "b", "c"]) == ["b"]

    def test_untracked_sessions_go_first(self):
        policy = LRUEvictionPolicy(1)
        policy.touch("b")

        assert policy.select_victims(["a", "b"]) == ["a"]

    def test_forget(self):
        policy = LRUEvictionPolicy(1)
        policy.touch("a")
        policy.forget("a")
        policy.touch("b")

        assert policy.select_victims(["b"]) == []

    def test_invalid_size(self):
        with pytest.raises(ConfigurationError):
            LRUEvictionPolicy(0)


class TestTTLEvictionPolicy:
    """Test cases for the TTL policy."""

    def test_expires_idle_sessions(self):
        clock = FakeClock()
        policy = TTLEvictionPolicy(10, clock=clock)
        policy.touch("a")
        clock.now = 5
        policy.touch("b")
        clock.now = 12

        assert policy.select_victims(["a", "b"]) == ["a"]

    def test_boundary_is_kept(self):
        clock = FakeClock()
        policy = TTLEvictionPolicy(10, clock=clock)
        policy.touch("a")
        clock.now = 10

        assert policy.select_victims(["a"]) == []

    def test_invalid_ttl(self):
        with pytest.raises(ConfigurationError):
            TTLEvictionPolicy(0)


class TestBuildEvictionPolicy:
    """Test cases for build_eviction_policy."""

    def test_none(self):
        assert isinstance(build_eviction_policy("none"), NoEvictionPolicy)
        assert NoEvictionPolicy().select_victims(["a", "b"]) == []

    def test_lru(self):
        policy = build_eviction_policy("lru", max_sessions=4)

        assert isinstance(policy, LRUEvictionPolicy)
        assert policy.max_sessions == 4

    def test_ttl(self):
        assert isinstance(build_eviction_policy("ttl", ttl_seconds=60), TTLEvictionPolicy)

    def test_missing_threshold(self):
        with pytest.raises(ConfigurationError, match="requires max_sessions"):
            build_eviction_policy("lru")

    def test_unknown(self):
        with pytest.raises(ConfigurationError, match="Unknown eviction policy"):
            build_eviction_policy("fifo")
