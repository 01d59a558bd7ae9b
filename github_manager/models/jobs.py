"""Records for the Actions workflow jobs API.

API Reference: https://docs.github.com/en/rest/actions/workflow-jobs

"""

from __future__ import annotations

from github_manager.hydration import GitHubEnum, GitHubList, GitHubRecord, GitHubResponse, timestamp_property


class JobStatus(GitHubEnum):
    """Status of a job or of one of its steps."""

    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    WAITING = "waiting"
    REQUESTED = "requested"
    PENDING = "pending"


class Step(GitHubRecord):
    """One step of a job."""

    name: str | None = None
    status: JobStatus = JobStatus.QUEUED
    conclusion: str | None = None
    number: int = 0
    started_at: str | None = None
    completed_at: str | None = None

    started_at_timestamp = timestamp_property("started_at")
    completed_at_timestamp = timestamp_property("completed_at")


class Job(GitHubResponse):
    """A job of a workflow run.

    Attributes:
        id: Unique identifier of the job.
        run_id: Identifier of the run the job belongs to.
        run_attempt: Attempt number of the run.
        status: Current status; an unknown value aborts hydration.
        conclusion: Outcome once completed ("success", "failure", ...).
        steps: Steps of the job, in execution order.
        labels: Runner labels requested by the job, in workflow order.
        runner_id: Identifier of the runner that picked up the job.

    Example:
        >>> Job.from_document({"labels": ["bug", "urgent"]}).labels
        ['bug', 'urgent']

    """

    id: int = 0
    run_id: int = 0
    run_url: str | None = None
    run_attempt: int = 0
    node_id: str | None = None
    head_sha: str | None = None
    head_branch: str | None = None
    url: str | None = None
    html_url: str | None = None
    status: JobStatus = JobStatus.QUEUED
    conclusion: str | None = None
    created_at: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    name: str | None = None
    workflow_name: str | None = None
    steps: tuple[Step, ...] = ()
    check_run_url: str | None = None
    labels: tuple[str | None, ...] = ()
    runner_id: int = 0
    runner_name: str | None = None
    runner_group_id: int = 0
    runner_group_name: str | None = None

    created_at_timestamp = timestamp_property("created_at")
    started_at_timestamp = timestamp_property("started_at")
    completed_at_timestamp = timestamp_property("completed_at")

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Job({self.name}, {self.status})"


class JobsList(GitHubList):
    """Page of jobs."""

    jobs: tuple[Job, ...] = ()
