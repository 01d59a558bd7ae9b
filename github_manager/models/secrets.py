"""Records for the Actions secrets API.

Secret values are never returned by GitHub; these records only describe
names, timestamps and visibility.

API Reference: https://docs.github.com/en/rest/actions/secrets

"""

from __future__ import annotations

from github_manager.hydration import GitHubEnum, GitHubList, GitHubResponse, timestamp_property


class Visibility(GitHubEnum):
    """Which repositories of an organization can use a secret."""

    ALL = "all"
    PRIVATE = "private"
    SELECTED = "selected"


class GitHubPublicKey(GitHubResponse):
    """Public key used to encrypt secrets before upload.

    ``key_id`` is kept as a string: GitHub documents it as one and
    returns values that do not fit a number.

    """

    key_id: str | None = None
    key: str | None = None


class Secret(GitHubResponse):
    """A repository or environment secret."""

    name: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Secret({self.name})"


class SecretsList(GitHubList):
    """Page of repository secrets."""

    secrets: tuple[Secret, ...] = ()


class OrganizationSecret(Secret):
    """An organization secret; ``visibility`` defaults to private."""

    visibility: Visibility = Visibility.PRIVATE
    selected_repositories_url: str | None = None


class OrganizationSecretsList(GitHubList):
    """Page of organization secrets."""

    secrets: tuple[OrganizationSecret, ...] = ()
