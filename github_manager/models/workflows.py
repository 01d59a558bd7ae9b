"""Records for the Actions workflows API.

API Reference: https://docs.github.com/en/rest/actions/workflows

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from github_manager.hydration import (
    FrozenDocument,
    GitHubEnum,
    GitHubList,
    GitHubRecord,
    GitHubResponse,
    timestamp_property,
)


class WorkflowState(GitHubEnum):
    """State of a workflow definition."""

    ACTIVE = "active"
    DELETED = "deleted"
    DISABLED_FORK = "disabled_fork"
    DISABLED_INACTIVITY = "disabled_inactivity"
    DISABLED_MANUALLY = "disabled_manually"


class Workflow(GitHubResponse):
    """A workflow file in a repository.

    Attributes:
        id: Unique identifier of the workflow.
        node_id: GraphQL node ID.
        name: Name declared in the workflow file.
        path: Path of the workflow file in the repository.
        state: Whether the workflow is active, deleted or disabled.
        created_at: Creation time (ISO-8601).
        updated_at: Last update time (ISO-8601).
        url: API URL for this workflow.
        html_url: Web URL to the workflow file.
        badge_url: URL of the status badge.

    """

    id: int = 0
    node_id: str | None = None
    name: str | None = None
    path: str | None = None
    state: WorkflowState = WorkflowState.DELETED
    created_at: str | None = None
    updated_at: str | None = None
    url: str | None = None
    html_url: str | None = None
    badge_url: str | None = None

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Workflow({self.name}, {self.state})"


class WorkflowsList(GitHubList):
    """Page of workflows."""

    workflows: tuple[Workflow, ...] = ()


class Billable(GitHubRecord):
    """Billable time on one runner platform (UBUNTU, MACOS or WINDOWS)."""

    name: str | None = None
    total_ms: int = 0


class WorkflowUsage(GitHubResponse):
    """Billable minutes used by a workflow in the current billing cycle.

    GitHub keys the ``billable`` object by platform name; ``billables``
    flattens it into one record per platform, carrying the key as ``name``.

    """

    billable: FrozenDocument = {}

    @property
    def billables(self) -> list[Billable]:
        """Per-platform usage, in the order GitHub sent it."""
        return billable_records(Billable, self.billable)


def billable_records(record_cls: type[Any], billable: Mapping[str, Any]) -> list[Any]:
    """Flatten a platform-keyed ``billable`` object into records named after each key."""
    records = []
    for platform, usage in billable.items():
        document = dict(usage) if isinstance(usage, Mapping) else {}
        document["name"] = platform
        records.append(record_cls.from_document(document))
    return records
