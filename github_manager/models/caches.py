"""Records for the Actions cache API.

API Reference: https://docs.github.com/en/rest/actions/cache

"""

from __future__ import annotations

from github_manager.hydration import GitHubList, GitHubRecord, GitHubResponse, timestamp_property


class CacheUsage(GitHubResponse):
    """Cache usage of an organization or enterprise."""

    total_active_caches_size_in_bytes: int = 0
    total_active_caches_count: int = 0


class RepositoryCacheUsage(GitHubResponse):
    """Cache usage of a single repository."""

    full_name: str | None = None
    active_caches_size_in_bytes: int = 0
    active_caches_count: int = 0


class RepositoriesCacheUsagesList(GitHubList):
    """Cache usage of every repository in an organization."""

    repository_cache_usages: tuple[RepositoryCacheUsage, ...] = ()


class ActionCache(GitHubRecord):
    """A single Actions cache entry."""

    id: int = 0
    ref: str | None = None
    key: str | None = None
    version: str | None = None
    last_accessed_at: str | None = None
    created_at: str | None = None
    size_in_bytes: int = 0

    last_accessed_at_timestamp = timestamp_property("last_accessed_at")
    created_at_timestamp = timestamp_property("created_at")


class RepositoryCachesList(GitHubList):
    """Page of cache entries for a repository."""

    actions_caches: tuple[ActionCache, ...] = ()
