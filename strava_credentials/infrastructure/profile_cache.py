"""
In-memory profile cache.

Implements the ProfileCache port for a single process. Profiles are keyed
by "<provider>:<id>".
"""

import logging
from functools import lru_cache

from strava_credentials.core.domain import UserProfile


logger = logging.getLogger(__name__)


def profile_cache_key(profile: UserProfile) -> str:
    """Cache key for a profile."""
    return f"{profile.provider}:{profile.id}"


class InMemoryProfileCache:
    """Dict-backed ProfileCache, for development and tests."""

    def __init__(self):
        self._profiles: dict[str, UserProfile] = {}

    def get(self, key: str) -> UserProfile | None:
        return self._profiles.get(key)

    def set(self, key: str, profile: UserProfile) -> None:
        self._profiles[key] = profile
        logger.debug(f"Cached profile {key}")

    def delete(self, key: str) -> bool:
        if key in self._profiles:
            del self._profiles[key]
            return True
        return False

    def clear(self) -> None:
        """Clear all cached profiles (for testing)."""
        self._profiles.clear()


@lru_cache()
def get_profile_cache() -> InMemoryProfileCache:
    """Get the process-wide profile cache."""
    return InMemoryProfileCache()
