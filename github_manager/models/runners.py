"""Records for self-hosted runners.

API Reference: https://docs.github.com/en/rest/actions/self-hosted-runners

"""

from __future__ import annotations

from github_manager.hydration import GitHubEnum, GitHubList, GitHubRecord, GitHubResponse, timestamp_property


class LabelType(GitHubEnum):
    """Whether a runner label was assigned by GitHub or by a user."""

    READ_ONLY = "read-only"
    CUSTOM = "custom"


class RunnerStatus(GitHubEnum):
    """Connection status of a runner."""

    ONLINE = "online"
    OFFLINE = "offline"


class RunnerLabel(GitHubRecord):
    """Label attached to a runner; ``type`` defaults to read-only."""

    id: int = 0
    name: str | None = None
    type: LabelType = LabelType.READ_ONLY


class Runner(GitHubResponse):
    """A self-hosted runner.

    Attributes:
        id: Unique identifier of the runner.
        name: Name of the runner.
        os: Operating system of the runner.
        status: Whether the runner is online or offline.
        busy: Whether the runner is executing a job.
        labels: Labels attached to the runner, in API order.

    """

    id: int = 0
    runner_group_id: int = 0
    name: str | None = None
    os: str | None = None
    status: RunnerStatus = RunnerStatus.OFFLINE
    busy: bool = False
    labels: tuple[RunnerLabel, ...] = ()

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Runner({self.name}, {self.status})"


class RunnersList(GitHubList):
    """Page of runners."""

    runners: tuple[Runner, ...] = ()


class RunnerLabelsList(GitHubList):
    """Labels of a runner."""

    labels: tuple[RunnerLabel, ...] = ()


class GitHubToken(GitHubResponse):
    """Registration or removal token for configuring a runner."""

    token: str | None = None
    expires_at: str | None = None

    expires_at_timestamp = timestamp_property("expires_at")

    def __repr__(self) -> str:
        """Return a representation with the token masked."""
        return f"GitHubToken(token=***, expires_at={self.expires_at!r})"
