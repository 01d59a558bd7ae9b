"""Actions secrets manager.

Only read and delete operations are provided: creating a secret needs
its value encrypted with the repository public key, which is outside
this library.

API Reference: https://docs.github.com/en/rest/actions/secrets

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, repo_path, segment
from github_manager.models import (
    GitHubPublicKey,
    OrganizationSecret,
    OrganizationSecretsList,
    Secret,
    SecretsList,
)
from github_manager.result import GitHubResult, ReturnFormat


def _secret_name(secret: Secret | str) -> str:
    return segment(secret.name if isinstance(secret, Secret) else secret)


class SecretsManager(BaseManager):
    """Manager for repository and organization secrets."""

    def get_repository_public_key(
        self,
        owner: str,
        repo: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get the public key used to encrypt repository secrets."""
        return self._get(f"{repo_path(owner, repo)}/actions/secrets/public-key", GitHubPublicKey, format=format)

    def get_organization_public_key(
        self,
        org: str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get the public key used to encrypt organization secrets."""
        return self._get(f"/orgs/{segment(org)}/actions/secrets/public-key", GitHubPublicKey, format=format)

    def list_repository_secrets(
        self,
        owner: str,
        repo: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List secrets of a repository (names only, never values)."""
        return self._get(
            f"{repo_path(owner, repo)}/actions/secrets",
            SecretsList,
            format=format,
            params=self._query(page, per_page),
        )

    def get_repository_secret(
        self,
        owner: str,
        repo: str,
        name: Secret | str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get a repository secret by name."""
        return self._get(f"{repo_path(owner, repo)}/actions/secrets/{_secret_name(name)}", Secret, format=format)

    def list_organization_secrets(
        self,
        org: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List secrets of an organization."""
        return self._get(
            f"/orgs/{segment(org)}/actions/secrets",
            OrganizationSecretsList,
            format=format,
            params=self._query(page, per_page),
        )

    def get_organization_secret(
        self,
        org: str,
        name: Secret | str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get an organization secret by name."""
        return self._get(
            f"/orgs/{segment(org)}/actions/secrets/{_secret_name(name)}", OrganizationSecret, format=format
        )

    def delete_repository_secret(self, owner: str, repo: str, name: Secret | str) -> GitHubResult[bool]:
        """Delete a repository secret. Succeeds on HTTP 204."""
        return self._status_call("DELETE", f"{repo_path(owner, repo)}/actions/secrets/{_secret_name(name)}")
