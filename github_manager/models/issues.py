"""Records for the Issues API.

API Reference: https://docs.github.com/en/rest/issues

"""

from __future__ import annotations

from github_manager.hydration import FrozenDocument, GitHubEnum, GitHubRecord, GitHubResponse, timestamp_property
from github_manager.models.common import User


class IssueState(GitHubEnum):
    """Open/closed state of an issue or milestone."""

    OPEN = "open"
    CLOSED = "closed"


class LockReason(GitHubEnum):
    """Reason given when locking an issue's conversation."""

    OFF_TOPIC = "off-topic"
    TOO_HEATED = "too heated"
    RESOLVED = "resolved"
    SPAM = "spam"


class AuthorAssociation(GitHubEnum):
    """How the author of an issue is associated with the repository."""

    COLLABORATOR = "COLLABORATOR"
    CONTRIBUTOR = "CONTRIBUTOR"
    FIRST_TIMER = "FIRST_TIMER"
    FIRST_TIME_CONTRIBUTOR = "FIRST_TIME_CONTRIBUTOR"
    MANNEQUIN = "MANNEQUIN"
    MEMBER = "MEMBER"
    NONE = "NONE"
    OWNER = "OWNER"


class Label(GitHubRecord):
    """Issue label."""

    id: int = 0
    node_id: str | None = None
    url: str | None = None
    name: str | None = None
    color: str | None = None
    default: bool = False
    description: str | None = None


class Milestone(GitHubRecord):
    """Issue milestone."""

    id: int = 0
    node_id: str | None = None
    number: int = 0
    title: str | None = None
    description: str | None = None
    url: str | None = None
    html_url: str | None = None
    state: IssueState = IssueState.OPEN
    creator: User | None = None
    open_issues: int = 0
    closed_issues: int = 0
    created_at: str | None = None
    updated_at: str | None = None
    due_on: str | None = None
    closed_at: str | None = None

    due_on_timestamp = timestamp_property("due_on")
    closed_at_timestamp = timestamp_property("closed_at")


class Issue(GitHubResponse):
    """GitHub issue.

    Note: Pull requests are also issues, but have additional fields.
    Check the pull_request field to distinguish.

    Attributes:
        id: Unique identifier.
        number: Issue number within the repository.
        title: Issue title.
        body: Issue body/description.
        state: Current state (open or closed).
        user: User who created the issue.
        labels: List of labels.
        assignees: List of assigned users.
        milestone: Associated milestone, or None.
        locked: Whether the conversation is locked.
        active_lock_reason: Why it was locked, or None.
        comments: Number of comments.

    """

    id: int = 0
    node_id: str | None = None
    url: str | None = None
    repository_url: str | None = None
    html_url: str | None = None
    number: int = 0
    state: IssueState = IssueState.OPEN
    state_reason: str | None = None
    title: str | None = None
    body: str | None = None
    user: User | None = None

    labels: tuple[Label, ...] = ()
    assignee: User | None = None
    assignees: tuple[User, ...] = ()
    milestone: Milestone | None = None

    locked: bool = False
    active_lock_reason: LockReason | None = None
    comments: int = 0
    pull_request: FrozenDocument | None = None
    closed_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    closed_by: User | None = None
    author_association: AuthorAssociation | None = None

    created_at_timestamp = timestamp_property("created_at")
    updated_at_timestamp = timestamp_property("updated_at")
    closed_at_timestamp = timestamp_property("closed_at")

    def __str__(self) -> str:
        """Return a human-readable string representation."""
        return f"Issue(#{self.number}: {self.title})"

    @property
    def is_pull_request(self) -> bool:
        """Check if this issue is actually a pull request."""
        return self.pull_request is not None
