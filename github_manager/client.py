"""Main GitHub client class.

This module provides the main entry point for the library. The
GitHubClient class builds one configuration and one transport, and
shares them across every resource-group manager.

Example:
    >>> from github_manager import GitHubClient
    >>>
    >>> with GitHubClient(token="ghp_xxx") as client:
    ...     runs = client.workflow_runs.list_repository_workflow_runs("octocat", "hello")
    ...     if runs.ok:
    ...         print(runs.value.total_count)

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from github_manager.auth import create_auth
from github_manager.config import ClientConfig
from github_manager.managers import (
    AppsManager,
    ArtifactsManager,
    CacheManager,
    IssuesManager,
    RunnersManager,
    SecretsManager,
    WorkflowJobsManager,
    WorkflowRunsManager,
    WorkflowsManager,
)
from github_manager.utils.http import HTTPClient

if TYPE_CHECKING:
    import httpx


class GitHubClient:
    """GitHub API client with one manager per resource group.

    Every manager method returns a ``GitHubResult``; see
    ``github_manager.result``.

    Attributes:
        artifacts: Actions artifacts.
        caches: Actions caches and cache usage.
        secrets: Actions secrets.
        runners: Self-hosted runners and their labels.
        workflows: Workflow definitions.
        workflow_runs: Workflow runs.
        workflow_jobs: Jobs of workflow runs.
        apps: GitHub Apps and installations.
        issues: Repository issues.

    Context Manager:
        >>> with GitHubClient(token="ghp_xxx") as client:
        ...     result = client.artifacts.get_artifact("octocat", "hello", 42)

    """

    __slots__ = (
        "_apps",
        "_artifacts",
        "_caches",
        "_config",
        "_http",
        "_issues",
        "_runners",
        "_secrets",
        "_workflow_jobs",
        "_workflow_runs",
        "_workflows",
    )

    def __init__(
        self,
        token: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        default_error_message: str | None = None,
        per_page: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the GitHub client.

        Args:
            token: GitHub token. If not provided, uses the GITHUB_TOKEN
                   environment variable or anonymous access.
            base_url: GitHub API base URL. Defaults to https://api.github.com.
                      Override for GitHub Enterprise.
            timeout: Request timeout in seconds. Default 30.
            max_retries: Maximum retry attempts. Default 3.
            default_error_message: Message reported in every ErrorDetail
                instead of GitHub's own.
            per_page: Default items per page for list calls. Default 30.
            transport: Optional httpx transport.

        Raises:
            ConfigurationError: If a value is invalid.

        """
        config_kwargs: dict[str, object] = {}
        if token is not None:
            config_kwargs["token"] = token
        if base_url is not None:
            config_kwargs["base_url"] = base_url
        if timeout is not None:
            config_kwargs["timeout"] = timeout
        if max_retries is not None:
            config_kwargs["max_retries"] = max_retries
        if default_error_message is not None:
            config_kwargs["default_error_message"] = default_error_message
        if per_page is not None:
            config_kwargs["per_page"] = per_page

        self._config = ClientConfig(**config_kwargs)  # type: ignore[arg-type]
        self._http = HTTPClient(self._config, create_auth(self._config.token), transport=transport)

        self._artifacts = ArtifactsManager(self._http, self._config)
        self._caches = CacheManager(self._http, self._config)
        self._secrets = SecretsManager(self._http, self._config)
        self._runners = RunnersManager(self._http, self._config)
        self._workflows = WorkflowsManager(self._http, self._config)
        self._workflow_runs = WorkflowRunsManager(self._http, self._config)
        self._workflow_jobs = WorkflowJobsManager(self._http, self._config)
        self._apps = AppsManager(self._http, self._config)
        self._issues = IssuesManager(self._http, self._config)

    # =========================================================================
    # Manager Properties
    # =========================================================================

    @property
    def artifacts(self) -> ArtifactsManager:
        """Access Actions artifacts.

        Example:
            >>> client.artifacts.list_artifacts("octocat", "hello").value.total_count

        """
        return self._artifacts

    @property
    def caches(self) -> CacheManager:
        """Access Actions caches and cache usage."""
        return self._caches

    @property
    def secrets(self) -> SecretsManager:
        """Access Actions secrets."""
        return self._secrets

    @property
    def runners(self) -> RunnersManager:
        """Access self-hosted runners."""
        return self._runners

    @property
    def workflows(self) -> WorkflowsManager:
        """Access workflow definitions.

        Example:
            >>> client.workflows.dispatch_workflow("octocat", "hello", "ci.yml", "main")

        """
        return self._workflows

    @property
    def workflow_runs(self) -> WorkflowRunsManager:
        """Access workflow runs."""
        return self._workflow_runs

    @property
    def workflow_jobs(self) -> WorkflowJobsManager:
        """Access jobs of workflow runs."""
        return self._workflow_jobs

    @property
    def apps(self) -> AppsManager:
        """Access GitHub Apps and installations."""
        return self._apps

    @property
    def issues(self) -> IssuesManager:
        """Access repository issues.

        Example:
            >>> issue = client.issues.get_issue("python", "cpython", 12345).unwrap()

        """
        return self._issues

    # =========================================================================
    # Client Properties
    # =========================================================================

    @property
    def config(self) -> ClientConfig:
        """Get the immutable client configuration."""
        return self._config

    @property
    def is_authenticated(self) -> bool:
        """Check if the client is authenticated.

        Returns:
            True if a token is configured.

        """
        return self._config.is_authenticated

    # =========================================================================
    # Lifecycle Methods
    # =========================================================================

    def close(self) -> None:
        """Close the client and release resources.

        This should be called when you're done using the client,
        or use the client as a context manager.

        """
        self._http.close()

    def __enter__(self) -> GitHubClient:
        """Enter context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Exit context manager and close the client."""
        self.close()

    def __repr__(self) -> str:
        """Return a string representation of the client."""
        auth_status = "authenticated" if self.is_authenticated else "anonymous"
        return f"GitHubClient(base_url={self._config.base_url!r}, {auth_status})"
