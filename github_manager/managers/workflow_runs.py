"""Workflow runs manager.

This module provides methods for GitHub's workflow runs API:
- List runs of a repository or of one workflow, with filters
- Get a run or one of its attempts
- Cancel, re-run, delete and clear logs
- Billable usage of a run

API Reference: https://docs.github.com/en/rest/actions/workflow-runs

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, identifier, repo_path, segment
from github_manager.models import WorkflowRun, WorkflowRunsList, WorkflowRunUsage
from github_manager.result import GitHubResult, ReturnFormat


class WorkflowRunsManager(BaseManager):
    """Manager for workflow runs.

    Example:
        >>> runs = client.workflow_runs.list_repository_workflow_runs(
        ...     "octocat", "hello", branch="main", status="failure"
        ... ).unwrap()
        >>> for run in runs.workflow_runs:
        ...     print(run.run_number, run.conclusion)

    """

    def list_repository_workflow_runs(
        self,
        owner: str,
        repo: str,
        *,
        actor: str | None = None,
        branch: str | None = None,
        event: str | None = None,
        status: str | None = None,
        created: str | None = None,
        head_sha: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List workflow runs of a repository.

        Args:
            owner: Repository owner.
            repo: Repository name.
            actor: Only runs triggered by this user.
            branch: Only runs on this branch.
            event: Only runs triggered by this event ("push", ...).
            status: Status or conclusion filter ("completed", "failure", ...).
            created: Date range filter, e.g. ">=2023-01-01".
            head_sha: Only runs for this commit.
            page: Page number for pagination.
            per_page: Results per page.
            format: How to return the body.

        """
        params = self._query(
            page,
            per_page,
            actor=actor,
            branch=branch,
            event=event,
            status=status,
            created=created,
            head_sha=head_sha,
        )
        return self._get(f"{repo_path(owner, repo)}/actions/runs", WorkflowRunsList, format=format, params=params)

    def list_workflow_runs(
        self,
        owner: str,
        repo: str,
        workflow: Any,
        *,
        actor: str | None = None,
        branch: str | None = None,
        event: str | None = None,
        status: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List runs of one workflow (by Workflow, id or file name)."""
        params = self._query(page, per_page, actor=actor, branch=branch, event=event, status=status)
        return self._get(
            f"{repo_path(owner, repo)}/actions/workflows/{identifier(workflow)}/runs",
            WorkflowRunsList,
            format=format,
            params=params,
        )

    def get_workflow_run(
        self,
        owner: str,
        repo: str,
        run: WorkflowRun | int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get a workflow run."""
        return self._get(f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}", WorkflowRun, format=format)

    def get_workflow_run_attempt(
        self,
        owner: str,
        repo: str,
        run: WorkflowRun | int,
        attempt_number: int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get a specific attempt of a workflow run."""
        return self._get(
            f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/attempts/{segment(attempt_number)}",
            WorkflowRun,
            format=format,
        )

    def delete_workflow_run(self, owner: str, repo: str, run: WorkflowRun | int) -> GitHubResult[bool]:
        """Delete a workflow run. Succeeds on HTTP 204."""
        return self._status_call("DELETE", f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}")

    def cancel_workflow_run(self, owner: str, repo: str, run: WorkflowRun | int) -> GitHubResult[bool]:
        """Cancel a workflow run. Succeeds on HTTP 202."""
        return self._status_call(
            "POST", f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/cancel", expected=202
        )

    def rerun_workflow(
        self,
        owner: str,
        repo: str,
        run: WorkflowRun | int,
        *,
        enable_debug_logging: bool = False,
    ) -> GitHubResult[bool]:
        """Re-run every job of a workflow run. Succeeds on HTTP 201."""
        return self._status_call(
            "POST",
            f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/rerun",
            expected=201,
            json_data={"enable_debug_logging": enable_debug_logging},
        )

    def rerun_failed_jobs(
        self,
        owner: str,
        repo: str,
        run: WorkflowRun | int,
        *,
        enable_debug_logging: bool = False,
    ) -> GitHubResult[bool]:
        """Re-run only the failed jobs of a workflow run. Succeeds on HTTP 201."""
        return self._status_call(
            "POST",
            f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/rerun-failed-jobs",
            expected=201,
            json_data={"enable_debug_logging": enable_debug_logging},
        )

    def delete_workflow_run_logs(self, owner: str, repo: str, run: WorkflowRun | int) -> GitHubResult[bool]:
        """Delete all logs of a workflow run. Succeeds on HTTP 204."""
        return self._status_call("DELETE", f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/logs")

    def get_workflow_run_logs_url(self, owner: str, repo: str, run: WorkflowRun | int) -> GitHubResult[str | None]:
        """Get the short-lived URL of the run's log archive (Location of the 302)."""
        return self._location_call(f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/logs")

    def get_workflow_run_usage(
        self,
        owner: str,
        repo: str,
        run: WorkflowRun | int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get billable time and duration of a workflow run."""
        return self._get(
            f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/timing",
            WorkflowRunUsage,
            format=format,
        )
