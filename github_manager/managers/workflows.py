"""Workflows manager.

API Reference: https://docs.github.com/en/rest/actions/workflows

"""

from __future__ import annotations

from typing import Any

from github_manager.managers.base import BaseManager, identifier, repo_path
from github_manager.models import Workflow, WorkflowsList, WorkflowUsage
from github_manager.result import GitHubResult, ReturnFormat


class WorkflowsManager(BaseManager):
    """Manager for workflow definitions.

    A workflow can be addressed by its numeric id, by its file name
    (``"ci.yml"``) or by the ``Workflow`` record itself.

    """

    def list_workflows(
        self,
        owner: str,
        repo: str,
        *,
        page: int | None = None,
        per_page: int | None = None,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """List workflows of a repository."""
        return self._get(
            f"{repo_path(owner, repo)}/actions/workflows",
            WorkflowsList,
            format=format,
            params=self._query(page, per_page),
        )

    def get_workflow(
        self,
        owner: str,
        repo: str,
        workflow: Workflow | int | str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get a workflow by id or file name."""
        return self._get(f"{repo_path(owner, repo)}/actions/workflows/{identifier(workflow)}", Workflow, format=format)

    def disable_workflow(self, owner: str, repo: str, workflow: Workflow | int | str) -> GitHubResult[bool]:
        """Disable a workflow. Succeeds on HTTP 204."""
        return self._status_call("PUT", f"{repo_path(owner, repo)}/actions/workflows/{identifier(workflow)}/disable")

    def enable_workflow(self, owner: str, repo: str, workflow: Workflow | int | str) -> GitHubResult[bool]:
        """Enable a workflow. Succeeds on HTTP 204."""
        return self._status_call("PUT", f"{repo_path(owner, repo)}/actions/workflows/{identifier(workflow)}/enable")

    def dispatch_workflow(
        self,
        owner: str,
        repo: str,
        workflow: Workflow | int | str,
        ref: str,
        *,
        inputs: dict[str, Any] | None = None,
    ) -> GitHubResult[bool]:
        """Trigger a ``workflow_dispatch`` event.

        Args:
            owner: Repository owner.
            repo: Repository name.
            workflow: Workflow, its id or its file name.
            ref: Branch or tag to run the workflow on.
            inputs: Input keys and values declared by the workflow.

        Returns:
            Result holding True if GitHub accepted the dispatch (HTTP 204).

        """
        payload: dict[str, Any] = {"ref": ref}
        if inputs:
            payload["inputs"] = inputs
        return self._status_call(
            "POST",
            f"{repo_path(owner, repo)}/actions/workflows/{identifier(workflow)}/dispatches",
            json_data=payload,
        )

    def get_workflow_usage(
        self,
        owner: str,
        repo: str,
        workflow: Workflow | int | str,
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
    ) -> GitHubResult[Any]:
        """Get billable minutes used by a workflow in the current cycle."""
        return self._get(
            f"{repo_path(owner, repo)}/actions/workflows/{identifier(workflow)}/timing",
            WorkflowUsage,
            format=format,
        )
