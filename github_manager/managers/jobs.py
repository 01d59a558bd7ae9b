"""Workflow jobs manager.

API Reference: https://docs.github.com/en/rest/actions/workflow-jobs

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, identifier, repo_path, segment
from github_manager.models import Job, JobsList
from github_manager.result import GitHubResult, ReturnFormat


class WorkflowJobsManager(BaseManager):
    """Manager for the jobs of workflow runs."""

    def get_job(
        self,
        owner: str,
        repo: str,
        job: Job | int,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get a job of a workflow run."""
        return self._get(f"{repo_path(owner, repo)}/actions/jobs/{identifier(job)}", Job, format=format)

    def list_workflow_run_jobs(
        self,
        owner: str,
        repo: str,
        run: Any,
        *,
        filter: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List jobs of a workflow run.

        Args:
            owner: Repository owner.
            repo: Repository name.
            run: WorkflowRun or its id.
            filter: "latest" (default on GitHub's side) or "all" attempts.
            page: Page number for pagination.
            per_page: Results per page.
            format: How to return the body.

        """
        return self._get(
            f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/jobs",
            JobsList,
            format=format,
            params=self._query(page, per_page, filter=filter),
        )

    def list_workflow_run_attempt_jobs(
        self,
        owner: str,
        repo: str,
        run: Any,
        attempt_number: int,
        *,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List jobs of one attempt of a workflow run."""
        return self._get(
            f"{repo_path(owner, repo)}/actions/runs/{identifier(run)}/attempts/{segment(attempt_number)}/jobs",
            JobsList,
            format=format,
            params=self._query(page, per_page),
        )

    def rerun_job(
        self,
        owner: str,
        repo: str,
        job: Job | int,
        *,
        enable_debug_logging: bool = False,
    ) -> GitHubResult[bool]:
        """Re-run a job and its dependents. Succeeds on HTTP 201."""
        return self._status_call(
            "POST",
            f"{repo_path(owner, repo)}/actions/jobs/{identifier(job)}/rerun",
            expected=201,
            json_data={"enable_debug_logging": enable_debug_logging},
        )

    def get_job_logs_url(self, owner: str, repo: str, job: Job | int) -> GitHubResult[str | None]:
        """Get the short-lived URL of a job's plain-text log (Location of the 302)."""
        return self._location_call(f"{repo_path(owner, repo)}/actions/jobs/{identifier(job)}/logs")
