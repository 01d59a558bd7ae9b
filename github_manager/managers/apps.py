"""GitHub Apps manager.

Most of these calls need a JWT signed with the app's private key as the
bearer token; ``create_installation_access_token`` exchanges it for an
installation token.

API Reference: https://docs.github.com/en/rest/apps/apps

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, identifier, repo_path, segment
from github_manager.models import GitHubApp, Installation, InstallationAccessToken
from github_manager.result import GitHubResult, ReturnFormat


class AppsManager(BaseManager):
    """Manager for GitHub Apps and their installations."""

    def get_authenticated_app(self, *, format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT) -> GitHubResult[Any]:
        """Get the app the JWT belongs to."""
        return self._get("/app", GitHubApp, format=format)

    def get_app(self, app_slug: str, *, format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT) -> GitHubResult[Any]:
        """Get a public app by its URL-friendly slug."""
        return self._get(f"/apps/{segment(app_slug)}", GitHubApp, format=format)

    def list_installations(
        self,
        *,
        since: str | None = None,
        outdated: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List installations of the authenticated app.

        Args:
            since: Only installations updated after this ISO-8601 time.
            outdated: Only installations with outdated permissions.
            page: Page number for pagination.
            per_page: Results per page.
            format: How to return the body.

        Returns:
            Result holding a list of Installation (``[]`` on failure).

        """
        params = self._query(page, per_page, since=since, outdated=outdated)
        return self._get("/app/installations", Installation, format=format, params=params, many=True)

    def get_installation(
        self,
        installation: Installation | int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get an installation of the authenticated app."""
        return self._get(f"/app/installations/{identifier(installation)}", Installation, format=format)

    def create_installation_access_token(
        self,
        installation: Installation | int,
        *,
        repositories: list[str] | None = None,
        repository_ids: list[int] | None = None,
        permissions: dict[str, str] | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Create an access token scoped to an installation.

        Args:
            installation: Installation or its id.
            repositories: Repository names the token can access.
            repository_ids: Repository ids the token can access.
            permissions: Permissions to narrow the token to,
                e.g. ``{"contents": "read"}``.
            format: How to return the body.

        """
        payload: dict[str, Any] = {}
        if repositories:
            payload["repositories"] = repositories
        if repository_ids:
            payload["repository_ids"] = repository_ids
        if permissions:
            payload["permissions"] = permissions
        return self._post(
            f"/app/installations/{identifier(installation)}/access_tokens",
            InstallationAccessToken,
            format=format,
            json_data=payload or None,
            expected=201,
        )

    def get_repository_installation(
        self,
        owner: str,
        repo: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get the app's installation on a repository."""
        return self._get(f"{repo_path(owner, repo)}/installation", Installation, format=format)

    def get_organization_installation(
        self,
        org: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get the app's installation on an organization."""
        return self._get(f"/orgs/{segment(org)}/installation", Installation, format=format)

    def get_user_installation(
        self,
        username: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get the app's installation on a user account."""
        return self._get(f"/users/{segment(username)}/installation", Installation, format=format)

    def suspend_installation(self, installation: Installation | int) -> GitHubResult[bool]:
        """Suspend an installation. Succeeds on HTTP 204."""
        return self._status_call("PUT", f"/app/installations/{identifier(installation)}/suspended")

    def unsuspend_installation(self, installation: Installation | int) -> GitHubResult[bool]:
        """Lift the suspension of an installation. Succeeds on HTTP 204."""
        return self._status_call("DELETE", f"/app/installations/{identifier(installation)}/suspended")

    def delete_installation(self, installation: Installation | int) -> GitHubResult[bool]:
        """Uninstall the app from an account. Succeeds on HTTP 204."""
        return self._status_call("DELETE", f"/app/installations/{identifier(installation)}")
