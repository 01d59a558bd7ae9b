"""Issues manager.

This module provides methods for interacting with GitHub's Issues API:
- List issues for repositories
- Get issue details
- Create and update issues
- Lock and unlock conversations

API Reference: https://docs.github.com/en/rest/issues

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, identifier, repo_path
from github_manager.models import Issue, LockReason
from github_manager.result import GitHubResult, ReturnFormat


class IssuesManager(BaseManager):
    """Manager for issue-related API calls.

    Issues are addressed by their number within the repository, or by the
    ``Issue`` record itself.

    Example:
        >>> issues = client.issues.list_repository_issues("python", "cpython", state="open").value
        >>> for issue in issues[:5]:
        ...     print(f"#{issue.number}: {issue.title}")

    """

    def list_repository_issues(
        self,
        owner: str,
        repo: str,
        *,
        state: str | None = None,
        labels: str | list[str] | None = None,
        sort: str | None = None,
        direction: str | None = None,
        since: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List issues for a repository.

        Note: This may include pull requests (they are also issues).
        Check issue.is_pull_request to filter them out.

        Args:
            owner: Repository owner.
            repo: Repository name.
            state: State filter ("open", "closed", "all").
            labels: Label names, as a list or comma-separated string.
            sort: Sort field ("created", "updated", "comments").
            direction: Sort direction ("asc", "desc").
            since: ISO 8601 timestamp for filtering.
            page: Page number for pagination.
            per_page: Results per page.
            format: How to return the body.

        Returns:
            Result holding a list of Issue (``[]`` on failure).

        """
        if isinstance(labels, list):
            labels = ",".join(labels)
        params = self._query(
            page,
            per_page,
            state=state,
            labels=labels,
            sort=sort,
            direction=direction,
            since=since,
        )
        return self._get(f"{repo_path(owner, repo)}/issues", Issue, format=format, params=params, many=True)

    def get_issue(
        self,
        owner: str,
        repo: str,
        issue_number: Issue | int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get a specific issue.

        Example:
            >>> issue = client.issues.get_issue("python", "cpython", 12345).unwrap()
            >>> print(f"#{issue.number}: {issue.title} ({issue.state})")

        """
        number = identifier(issue_number, "number")
        return self._get(f"{repo_path(owner, repo)}/issues/{number}", Issue, format=format)

    def create_issue(
        self,
        owner: str,
        repo: str,
        title: str,
        *,
        body: str | None = None,
        assignees: list[str] | None = None,
        labels: list[str] | None = None,
        milestone: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        r"""Create a new issue.

        Args:
            owner: Repository owner.
            repo: Repository name.
            title: Issue title.
            body: Issue body (Markdown supported).
            assignees: List of usernames to assign.
            labels: List of label names.
            milestone: Milestone number to associate.
            format: How to return the body.

        Returns:
            Result holding the created Issue. Without credentials the call
            is not sent and the result carries an authentication error.

        Example:
            >>> issue = client.issues.create_issue(
            ...     "owner",
            ...     "repo",
            ...     title="Bug: Something is broken",
            ...     body="## Description\n\nDetails here...",
            ...     labels=["bug", "needs-triage"],
            ... ).unwrap()

        """
        unauthenticated = self._require_auth("create issues")
        if unauthenticated is not None:
            return unauthenticated

        data: dict[str, Any] = {"title": title}
        if body:
            data["body"] = body
        if assignees:
            data["assignees"] = assignees
        if milestone:
            data["milestone"] = milestone
        if labels:
            data["labels"] = labels

        return self._post(f"{repo_path(owner, repo)}/issues", Issue, format=format, json_data=data, expected=201)

    def update_issue(
        self,
        owner: str,
        repo: str,
        issue_number: Issue | int,
        *,
        title: str | None = None,
        body: str | None = None,
        state: str | None = None,
        labels: list[str] | None = None,
        assignees: list[str] | None = None,
        milestone: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Update an existing issue.

        Only the arguments that are set are sent; lists replace the
        existing values.

        """
        unauthenticated = self._require_auth("update issues")
        if unauthenticated is not None:
            return unauthenticated

        data: dict[str, Any] = {}
        if title is not None:
            data["title"] = title
        if body is not None:
            data["body"] = body
        if state is not None:
            data["state"] = state
        if assignees is not None:
            data["assignees"] = assignees
        if milestone is not None:
            data["milestone"] = milestone
        if labels is not None:
            data["labels"] = labels

        number = identifier(issue_number, "number")
        return self._patch(f"{repo_path(owner, repo)}/issues/{number}", Issue, format=format, json_data=data)

    def lock_issue(
        self,
        owner: str,
        repo: str,
        issue_number: Issue | int,
        *,
        lock_reason: LockReason | str | None = None,
    ) -> GitHubResult[bool]:
        """Lock an issue's conversation. Succeeds on HTTP 204."""
        number = identifier(issue_number, "number")
        payload = {"lock_reason": str(lock_reason)} if lock_reason is not None else None
        return self._status_call("PUT", f"{repo_path(owner, repo)}/issues/{number}/lock", json_data=payload)

    def unlock_issue(self, owner: str, repo: str, issue_number: Issue | int) -> GitHubResult[bool]:
        """Unlock an issue's conversation. Succeeds on HTTP 204."""
        number = identifier(issue_number, "number")
        return self._status_call("DELETE", f"{repo_path(owner, repo)}/issues/{number}/lock")
