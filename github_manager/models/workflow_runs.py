"""Records for the Actions workflow runs API.

API Reference: https://docs.github.com/en/rest/actions/workflow-runs

"""

from __future__ import annotations

from github_manager.hydration import (
    FrozenDocument,
    GitHubEnum,
    GitHubList,
    GitHubRecord,
    GitHubResponse,
    timestamp_property,
)
from github_manager.models.common import Repository, RepositoryRef, User
from github_manager.models.workflows import billable_records


class WorkflowRunStatus(GitHubEnum):
    """Status (or conclusion) of a workflow run."""

    COMPLETED = "completed"
    ACTION_REQUIRED = "action_required"
    CANCELLED = "cancelled"
    FAILURE = "failure"
    NEUTRAL = "neutral"
    SKIPPED = "skipped"
    STALE = "stale"
    SUCCESS = "success"
    TIMED_OUT = "timed_out"
    IN_PROGRESS = "in_progress"
    QUEUED = "queued"
    REQUESTED = "requested"
    WAITING = "waiting"
    PENDING = "pending"


# =============================================================================
# Nested records
# =============================================================================


class PullRequestPart(GitHubRecord):
    """Head or base of a pull request that triggered a run."""

    sha: str | None = None
    ref: str | None = None
    repo: RepositoryRef


class RunPullRequest(GitHubRecord):
    """Pull request associated with a workflow run."""

    id: int = 0
    number: int = 0
    url: str | None = None
    head: PullRequestPart
    base: PullRequestPart


class ReferencedWorkflow(GitHubRecord):
    """A reusable workflow called by the run."""

    path: str | None = None
    sha: str | None = None
    ref: str | None = None


class CommitProfile(GitHubRecord):
    """Author or committer of a commit."""

    name: str | None = None
    email: str | None = None


class HeadCommit(GitHubRecord):
    """The commit a run was triggered for.

    ``id`` and ``tree_id`` are SHAs, so they stay strings.

    """

    id: str | None = None
    tree_id: str | None = None
    message: str | None = None
    timestamp: str | None = None
    author: CommitProfile
    committer: CommitProfile

    committed_at_timestamp = timestamp_property("timestamp")


# =============================================================================
# Workflow run
# =============================================================================


class WorkflowRun(GitHubResponse):
    """A single run of a workflow.

    Nested ``actor``, ``head_commit`` and repositories are never None;
    missing sub-documents hydrate as all-default records. ``status``
    defaults to in_progress and ``conclusion`` stays None until the run
    finishes.

    Example:
        >>> run = WorkflowRun.from_document({})
        >>> run.head_commit.author.name is None
        True

    """

    id: int = 0
    name: str | None = None
    node_id: str | None = None
    check_suite_id: int = 0
    check_suite_node_id: str | None = None
    head_branch: str | None = None
    head_sha: str | None = None
    path: str | None = None
    run_number: int = 0
    run_attempt: int = 0
    event: str | None = None
    display_title: str | None = None
    status: WorkflowRunStatus = WorkflowRunStatus.IN_PROGRESS
    conclusion: WorkflowRunStatus | None = None
    workflow_id: int = 0
    url: str | None = None
    html_url: str | None = None
    pull_requests: tuple[RunPullRequest, ...] = ()
    referenced_workflows: tuple[ReferencedWorkflow, ...] = ()
    created_at: str | None = None
    updated_at: str | None = None
    run_started_at: str | None = None
    actor: User
    triggering_actor: User
    jobs_url: str | None = None
    logs_url: str | None = None
    check_suite_url: str | None = None
    artifacts_url: str | None = None
    cancel_url: str | None = None
    rerun_url: str | None = None
    previous_attempt_url: str | None = None
    workflow_url: str | None = None
    head_commit: HeadCommit
    repository: Repository
    head_repository: Repository

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
    run_started_at_timestamp = timestamp_property("run_started_at")

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"WorkflowRun(#{self.run_number} {self.name}, {self.status})"


class WorkflowRunsList(GitHubList):
    """Page of workflow runs."""

    workflow_runs: tuple[WorkflowRun, ...] = ()


# =============================================================================
# Usage
# =============================================================================


class JobRun(GitHubRecord):
    """Billable duration of one job of a run."""

    job_id: int = 0
    duration_ms: int = 0


class BillableRun(GitHubRecord):
    """Billable usage of a run on one runner platform."""

    name: str | None = None
    total_ms: int = 0
    jobs: int = 0
    job_runs: tuple[JobRun, ...] = ()


class WorkflowRunUsage(GitHubResponse):
    """Billable time and total duration of a workflow run."""

    billable: FrozenDocument = {}
    run_duration_ms: int = 0

    @property
    def billables(self) -> list[BillableRun]:
        """Per-platform usage, in the order GitHub sent it."""
        return billable_records(BillableRun, self.billable)
