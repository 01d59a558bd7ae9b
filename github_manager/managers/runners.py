"""Self-hosted runners manager.

API Reference: https://docs.github.com/en/rest/actions/self-hosted-runners

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, identifier, repo_path, segment
from github_manager.models import GitHubToken, Runner, RunnerLabelsList, RunnersList
from github_manager.result import GitHubResult, ReturnFormat


class RunnersManager(BaseManager):
    """Manager for self-hosted runners and their labels.

    Example:
        >>> token = client.runners.create_repository_registration_token("octocat", "hello")
        >>> print(token.value.expires_at)

    """

    def list_repository_runners(
        self,
        owner: str,
        repo: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List self-hosted runners of a repository."""
        return self._get(
            f"{repo_path(owner, repo)}/actions/runners",
            RunnersList,
            format=format,
            params=self._query(page, per_page),
        )

    def list_organization_runners(
        self,
        org: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List self-hosted runners of an organization."""
        return self._get(
            f"/orgs/{segment(org)}/actions/runners",
            RunnersList,
            format=format,
            params=self._query(page, per_page),
        )

    def get_repository_runner(
        self,
        owner: str,
        repo: str,
        runner: Runner | int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get a self-hosted runner of a repository."""
        return self._get(f"{repo_path(owner, repo)}/actions/runners/{identifier(runner)}", Runner, format=format)

    def create_repository_registration_token(
        self,
        owner: str,
        repo: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Create a token for registering a new runner (valid one hour)."""
        return self._post(
            f"{repo_path(owner, repo)}/actions/runners/registration-token",
            GitHubToken,
            format=format,
            expected=201,
        )

    def create_repository_remove_token(
        self,
        owner: str,
        repo: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Create a token for removing a runner (valid one hour)."""
        return self._post(
            f"{repo_path(owner, repo)}/actions/runners/remove-token",
            GitHubToken,
            format=format,
            expected=201,
        )

    def delete_repository_runner(self, owner: str, repo: str, runner: Runner | int) -> GitHubResult[bool]:
        """Remove a self-hosted runner from a repository. Succeeds on HTTP 204."""
        return self._status_call("DELETE", f"{repo_path(owner, repo)}/actions/runners/{identifier(runner)}")

    # =========================================================================
    # Labels
    # =========================================================================

    def list_runner_labels(
        self,
        owner: str,
        repo: str,
        runner: Runner | int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List labels of a self-hosted runner."""
        return self._get(
            f"{repo_path(owner, repo)}/actions/runners/{identifier(runner)}/labels",
            RunnerLabelsList,
            format=format,
        )

    def add_runner_labels(
        self,
        owner: str,
        repo: str,
        runner: Runner | int,
        labels: list[str],
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Add custom labels to a runner.

        Returns:
            Result holding every label of the runner after the change.

        """
        return self._post(
            f"{repo_path(owner, repo)}/actions/runners/{identifier(runner)}/labels",
            RunnerLabelsList,
            format=format,
            json_data={"labels": list(labels)},
        )

    def set_runner_labels(
        self,
        owner: str,
        repo: str,
        runner: Runner | int,
        labels: list[str],
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Replace all custom labels of a runner.

        An empty list removes every custom label.

        """
        return self._put(
            f"{repo_path(owner, repo)}/actions/runners/{identifier(runner)}/labels",
            RunnerLabelsList,
            format=format,
            json_data={"labels": list(labels)},
        )
