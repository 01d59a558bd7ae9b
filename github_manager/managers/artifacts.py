"""Artifacts manager.

This module provides methods for GitHub's Actions artifacts API:
- List artifacts of a repository or of a workflow run
- Get and delete a single artifact
- Resolve an artifact's archive download URL

API Reference: https://docs.github.com/en/rest/actions/artifacts

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, identifier, repo_path, segment
from github_manager.models import Artifact, ArtifactsList
from github_manager.result import GitHubResult, ReturnFormat


class ArtifactsManager(BaseManager):
    """Manager for artifact-related API calls.

    Example:
        >>> result = client.artifacts.list_artifacts("octocat", "hello-world")
        >>> for artifact in result.value.artifacts:
        ...     print(artifact.name, artifact.size_in_bytes)

    """

    def list_artifacts(
        self,
        owner: str,
        repo: str,
        *,
        name: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List artifacts for a repository.

        Args:
            owner: Repository owner.
            repo: Repository name.
            name: Only return artifacts with this exact name.
            page: Page number for pagination.
            per_page: Results per page.
            format: How to return the body.

        Returns:
            Result holding an ArtifactsList.

        """
        params = self._query(page, per_page, name=name)
        return self._get(f"{repo_path(owner, repo)}/actions/artifacts", ArtifactsList, format=format, params=params)

    def get_artifact(
        self,
        owner: str,
        repo: str,
        artifact: Artifact | int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get a specific artifact.

        Args:
            owner: Repository owner.
            repo: Repository name.
            artifact: Artifact or its id.
            format: How to return the body.

        Example:
            >>> artifact = client.artifacts.get_artifact("octocat", "hello", 42).unwrap()

        """
        artifact_id = identifier(artifact)
        return self._get(f"{repo_path(owner, repo)}/actions/artifacts/{artifact_id}", Artifact, format=format)

    def delete_artifact(self, owner: str, repo: str, artifact: Artifact | int) -> GitHubResult[bool]:
        """Delete an artifact. Succeeds on HTTP 204."""
        artifact_id = identifier(artifact)
        return self._status_call("DELETE", f"{repo_path(owner, repo)}/actions/artifacts/{artifact_id}")

    def get_artifact_download_url(
        self,
        owner: str,
        repo: str,
        artifact: Artifact | int,
        *,
        archive_format: str = "zip",
    ) -> GitHubResult[str | None]:
        """Get the short-lived URL the archive can be downloaded from.

        GitHub answers with a 302 redirect; the URL is its Location header.

        """
        path = f"{repo_path(owner, repo)}/actions/artifacts/{identifier(artifact)}/{segment(archive_format)}"
        return self._location_call(path)

    def list_workflow_run_artifacts(
        self,
        owner: str,
        repo: str,
        run: Any,
        *,
        name: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List artifacts produced by a workflow run.

        Args:
            owner: Repository owner.
            repo: Repository name.
            run: WorkflowRun or its id.
            name: Only return artifacts with this exact name.
            page: Page number for pagination.
            per_page: Results per page.
            format: How to return the body.

        """
        run_id = identifier(run)
        params = self._query(page, per_page, name=name)
        return self._get(
            f"{repo_path(owner, repo)}/actions/runs/{run_id}/artifacts",
            ArtifactsList,
            format=format,
            params=params,
        )
