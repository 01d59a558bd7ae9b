"""Records for the GitHub Apps API.

``AppPermissions`` declares one field per permission key GitHub can
grant. Keys the record does not declare are ignored; keys it declares
must carry a known access level.

API Reference: https://docs.github.com/en/rest/apps

"""

from __future__ import annotations

from github_manager.hydration import GitHubEnum, GitHubRecord, GitHubResponse, timestamp_property
from github_manager.models.common import Repository, User


class PermissionType(GitHubEnum):
    """Access level of most permissions."""

    READ = "read"
    WRITE = "write"


class AdminPermissionType(GitHubEnum):
    """Access level of the project permissions, which also allow admin."""

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"


class RepositorySelection(GitHubEnum):
    """Which repositories an installation can access."""

    ALL = "all"
    SELECTED = "selected"


class AppPermissions(GitHubRecord):
    """Permissions granted to an app or installation.

    Every field is None when the key is absent, meaning the permission
    is not granted.

    """

    actions: PermissionType | None = None
    administration: PermissionType | None = None
    checks: PermissionType | None = None
    contents: PermissionType | None = None
    deployments: PermissionType | None = None
    environments: PermissionType | None = None
    issues: PermissionType | None = None
    metadata: PermissionType | None = None
    packages: PermissionType | None = None
    pages: PermissionType | None = None
    pull_requests: PermissionType | None = None
    repository_announcement_banners: PermissionType | None = None
    repository_hooks: PermissionType | None = None
    repository_projects: AdminPermissionType | None = None
    secret_scanning_alerts: PermissionType | None = None
    secrets: PermissionType | None = None
    security_events: PermissionType | None = None
    single_file: PermissionType | None = None
    statuses: PermissionType | None = None
    vulnerability_alerts: PermissionType | None = None
    workflows: PermissionType | None = None
    members: PermissionType | None = None
    organization_administration: PermissionType | None = None
    organization_custom_roles: PermissionType | None = None
    organization_announcement_banners: PermissionType | None = None
    organization_hooks: PermissionType | None = None
    organization_plan: PermissionType | None = None
    organization_projects: AdminPermissionType | None = None
    organization_packages: PermissionType | None = None
    organization_secrets: PermissionType | None = None
    organization_self_hosted_runners: PermissionType | None = None
    organization_user_blocking: PermissionType | None = None
    team_discussions: PermissionType | None = None

    def granted(self) -> dict[str, str]:
        """Return the granted permissions as ``{key: level}``."""
        return {key: level for key, level in self.to_document().items() if level is not None}


class GitHubApp(GitHubResponse):
    """A GitHub App.

    ``client_secret``, ``webhook_secret`` and ``pem`` are only present in
    the response of the app-manifest conversion.

    """

    id: int = 0
    slug: str | None = None
    node_id: str | None = None
    owner: User
    name: str | None = None
    description: str | None = None
    external_url: str | None = None
    html_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    permissions: AppPermissions
    events: tuple[str | None, ...] = ()
    installations_count: int = 0
    client_id: str | None = None
    client_secret: str | None = None
    webhook_secret: str | None = None
    pem: str | None = None

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"GitHubApp({self.slug})"


class Installation(GitHubResponse):
    """An installation of a GitHub App on a user or organization.

    ``suspended_by`` is None unless the installation is suspended;
    ``repository_selection`` defaults to all.

    """

    id: int = 0
    account: User
    access_tokens_url: str | None = None
    repositories_url: str | None = None
    html_url: str | None = None
    app_id: int = 0
    app_slug: str | None = None
    target_id: int = 0
    target_type: str | None = None
    permissions: AppPermissions
    events: tuple[str | None, ...] = ()
    single_file_name: str | None = None
    has_multiple_single_files: bool = False
    single_file_paths: tuple[str | None, ...] = ()
    repository_selection: RepositorySelection = RepositorySelection.ALL
    created_at: str | None = None
    updated_at: str | None = None
    suspended_at: str | None = None
    suspended_by: User | None = None
    contact_email: str | None = None

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
    suspended_at_timestamp = timestamp_property("suspended_at")

    @property
    def is_suspended(self) -> bool:
        """Whether the installation is currently suspended."""
        return self.suspended_at is not None

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Installation({self.id}, {self.app_slug})"


class InstallationAccessToken(GitHubResponse):
    """Short-lived token scoped to an installation."""

    token: str | None = None
    expires_at: str | None = None
    permissions: AppPermissions
    repository_selection: RepositorySelection = RepositorySelection.ALL
    repositories: tuple[Repository, ...] = ()
    single_file: str | None = None
    has_multiple_single_files: bool = False
    single_file_paths: tuple[str | None, ...] = ()

    expires_at_timestamp = timestamp_property("expires_at")

    def __repr__(self) -> str:
        """Return a representation with the token masked."""
        return f"InstallationAccessToken(token=***, expires_at={self.expires_at!r})"
