"""Records shared by several resource groups.

These are the compact user and repository shapes GitHub embeds inside
other resources (``actor``, ``owner``, ``repository`` and friends).

"""

from __future__ import annotations

from github_manager.hydration import GitHubRecord, GitHubResponse, timestamp_property


class User(GitHubRecord):
    """Simple user (or organization) embedded in another resource.

    Attributes:
        id: Unique identifier of the account.
        login: Username (handle).
        node_id: GraphQL node ID.
        avatar_url: URL to the account's avatar.
        url: API URL for this account.
        html_url: Web URL to the profile.
        type: Account type ("User", "Organization" or "Bot").
        site_admin: Whether the account is a GitHub staff member.
        name: Display name, when GitHub includes it.
        email: Public email, when GitHub includes it.

    """

    id: int = 0
    login: str | None = None
    node_id: str | None = None
    avatar_url: str | None = None
    gravatar_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    type: str | None = None
    site_admin: bool = False
    name: str | None = None
    email: str | None = None

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"User({self.login})"


class RepositoryRef(GitHubRecord):
    """Minimal repository reference (``id``, ``url``, ``name``)."""

    id: int = 0
    url: str | None = None
    name: str | None = None


class Repository(GitHubResponse):
    """Repository as embedded in workflow runs and installations.

    Only the identifying fields are modelled; everything else GitHub sends
    is ignored.

    """

    id: int = 0
    node_id: str | None = None
    name: str | None = None
    full_name: str | None = None
    owner: User
    private: bool = False
    fork: bool = False
    description: str | None = None
    url: str | None = None
    html_url: str | None = None
    default_branch: str | None = None
    visibility: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    pushed_at: str | None = None

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
    pushed_at_timestamp = timestamp_property("pushed_at")

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Repository({self.full_name})"
