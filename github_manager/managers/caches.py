"""Actions cache manager.

API Reference: https://docs.github.com/en/rest/actions/cache

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, identifier, repo_path, segment
from github_manager.models import (
    ActionCache,
    CacheUsage,
    RepositoriesCacheUsagesList,
    RepositoryCacheUsage,
    RepositoryCachesList,
)
from github_manager.result import GitHubResult, ReturnFormat


class CacheManager(BaseManager):
    """Manager for Actions cache usage and cache entries."""

    def get_repository_cache_usage(
        self,
        owner: str,
        repo: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get cache usage of a repository."""
        return self._get(f"{repo_path(owner, repo)}/actions/cache/usage", RepositoryCacheUsage, format=format)

    def get_organization_cache_usage(
        self,
        org: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get total cache usage of an organization."""
        return self._get(f"/orgs/{segment(org)}/actions/cache/usage", CacheUsage, format=format)

    def list_organization_repositories_cache_usage(
        self,
        org: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List cache usage of every repository in an organization."""
        return self._get(
            f"/orgs/{segment(org)}/actions/cache/usage-by-repository",
            RepositoriesCacheUsagesList,
            format=format,
            params=self._query(page, per_page),
        )

    def list_repository_caches(
        self,
        owner: str,
        repo: str,
        *,
        ref: str | None = None,
        key: str | None = None,
        sort: str | None = None,
        direction: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List caches of a repository.

        Args:
            owner: Repository owner.
            repo: Repository name.
            ref: Only caches for this Git reference (``refs/heads/<branch>``).
            key: Only caches whose key starts with this prefix.
            sort: "created_at", "last_accessed_at" or "size_in_bytes".
            direction: "asc" or "desc".
            page: Page number for pagination.
            per_page: Results per page.
            format: How to return the body.

        """
        params = self._query(page, per_page, ref=ref, key=key, sort=sort, direction=direction)
        return self._get(f"{repo_path(owner, repo)}/actions/caches", RepositoryCachesList, format=format, params=params)

    def delete_cache_by_id(self, owner: str, repo: str, cache: ActionCache | int) -> GitHubResult[bool]:
        """Delete one cache entry. Succeeds on HTTP 204."""
        return self._status_call("DELETE", f"{repo_path(owner, repo)}/actions/caches/{identifier(cache)}")

    def delete_caches_by_key(
        self,
        owner: str,
        repo: str,
        key: str,
        *,
        ref: str | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Delete every cache entry matching ``key`` (and ``ref``, if given).

        Returns:
            Result holding the deleted entries as a RepositoryCachesList.

        """
        params = self._query(key=key, ref=ref)
        return self._delete(
            f"{repo_path(owner, repo)}/actions/caches", RepositoryCachesList, format=format, params=params
        )
