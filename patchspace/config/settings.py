"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from patchspace.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

EVICTION_POLICIES = ("none", "lru", "ttl")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.read_max_lines: int = self._get_int_env("PATCHSPACE_READ_MAX_LINES", 200)
        self.grep_max_results: int = self._get_int_env(
            "PATCHSPACE_GREP_MAX_RESULTS", 50
        )
        self.grep_line_max_chars: int = self._get_int_env(
            "PATCHSPACE_GREP_LINE_MAX_CHARS", 200
        )
        self.suggestion_limit: int = self._get_int_env("PATCHSPACE_SUGGESTION_LIMIT", 3)

        self.eviction_policy: str = self._get_env("PATCHSPACE_EVICTION", "none").lower()
        if self.eviction_policy not in EVICTION_POLICIES:
            raise ConfigurationError(
                f"PATCHSPACE_EVICTION must be one of {', '.join(EVICTION_POLICIES)}, "
                f"got {self.eviction_policy!r}"
            )
        self.max_sessions: Optional[int] = self._get_optional_int_env(
            "PATCHSPACE_MAX_SESSIONS"
        )
        self.session_ttl_seconds: Optional[float] = self._get_optional_float_env(
            "PATCHSPACE_SESSION_TTL_SECONDS"
        )
        if self.eviction_policy == "lru" and not self.max_sessions:
            raise ConfigurationError(
                "PATCHSPACE_MAX_SESSIONS is required when PATCHSPACE_EVICTION=lru"
            )
        if self.eviction_policy == "ttl" and not self.session_ttl_seconds:
            raise ConfigurationError(
                "PATCHSPACE_SESSION_TTL_SECONDS is required when PATCHSPACE_EVICTION=ttl"
            )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get a positive integer environment variable."""
        value = self._get_optional_int_env(key)
        return default if value is None else value

    def _get_optional_int_env(self, key: str) -> Optional[int]:
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return None
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer")
        if value < 1:
            raise ConfigurationError(f"Environment variable {key} must be positive")
        return value

    def _get_optional_float_env(self, key: str) -> Optional[float]:
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return None
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be a number")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive")
        return value


# Global settings instance
settings = Settings()
