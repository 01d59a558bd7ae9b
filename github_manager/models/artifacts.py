"""Records for the Actions artifacts API.

API Reference: https://docs.github.com/en/rest/actions/artifacts

"""

from __future__ import annotations

from github_manager.hydration import GitHubList, GitHubRecord, GitHubResponse, timestamp_property


class ArtifactWorkflowRun(GitHubRecord):
    """The workflow run an artifact was produced by."""

    id: int = 0
    repository_id: int = 0
    head_repository_id: int = 0
    head_branch: str | None = None
    head_sha: str | None = None


class Artifact(GitHubResponse):
    """A workflow artifact.

    ``workflow_run`` is never None: when GitHub omits it, an all-default
    ``ArtifactWorkflowRun`` takes its place.

    Attributes:
        id: Unique identifier of the artifact.
        node_id: GraphQL node ID.
        name: Name of the artifact.
        size_in_bytes: Size of the artifact in bytes.
        url: API URL for this artifact.
        archive_download_url: API URL to download the zip archive.
        expired: Whether the artifact has expired.
        created_at: Creation time (ISO-8601).
        expires_at: Expiry time (ISO-8601).
        updated_at: Last update time (ISO-8601).
        workflow_run: The run that produced the artifact.

    Example:
        >>> artifact = Artifact.from_document({"id": 42, "name": "demo"})
        >>> artifact.size_in_bytes
        0

    """

    id: int = 0
    node_id: str | None = None
    name: str | None = None
    size_in_bytes: int = 0
    url: str | None = None
    archive_download_url: str | None = None
    expired: bool = False
    created_at: str | None = None
    expires_at: str | None = None
    updated_at: str | None = None
    workflow_run: ArtifactWorkflowRun

    created_at_timestamp = timestamp_property("created_at")
    expires_at_timestamp = timestamp_property("expires_at")
    updated_at_timestamp = timestamp_property("updated_at")

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Artifact({self.name}, {self.size_in_bytes} bytes)"


class ArtifactsList(GitHubList):
    """Page of artifacts (``{"total_count": ..., "artifacts": [...]}``)."""

    artifacts: tuple[Artifact, ...] = ()
