"""Typed records for GitHub API responses.

Every record hydrates tolerantly from a JSON document: missing keys take
defaults, wrong-typed values fall back to defaults, and only enum fields
are strict.

Example:
    >>> from github_manager.models import Artifact
    >>> artifact = Artifact.from_document(api_response)
    >>> print(artifact.name, artifact.created_at_timestamp)

"""

from github_manager.models.apps import (
    AdminPermissionType,
    AppPermissions,
    GitHubApp,
    Installation,
    InstallationAccessToken,
    PermissionType,
    RepositorySelection,
)
from github_manager.models.artifacts import Artifact, ArtifactsList, ArtifactWorkflowRun
from github_manager.models.caches import (
    ActionCache,
    CacheUsage,
    RepositoriesCacheUsagesList,
    RepositoryCacheUsage,
    RepositoryCachesList,
)
from github_manager.models.common import Repository, RepositoryRef, User
from github_manager.models.issues import (
    AuthorAssociation,
    Issue,
    IssueState,
    Label,
    LockReason,
    Milestone,
)
from github_manager.models.jobs import Job, JobsList, JobStatus, Step
from github_manager.models.runners import (
    GitHubToken,
    LabelType,
    Runner,
    RunnerLabel,
    RunnerLabelsList,
    RunnersList,
    RunnerStatus,
)
from github_manager.models.secrets import (
    GitHubPublicKey,
    OrganizationSecret,
    OrganizationSecretsList,
    Secret,
    SecretsList,
    Visibility,
)
from github_manager.models.workflow_runs import (
    BillableRun,
    CommitProfile,
    HeadCommit,
    JobRun,
    PullRequestPart,
    ReferencedWorkflow,
    RunPullRequest,
    WorkflowRun,
    WorkflowRunsList,
    WorkflowRunStatus,
    WorkflowRunUsage,
)
from github_manager.models.workflows import (
    Billable,
    Workflow,
    WorkflowsList,
    WorkflowState,
    WorkflowUsage,
)

__all__ = [
    "ActionCache",
    "AdminPermissionType",
    "AppPermissions",
    "Artifact",
    "ArtifactWorkflowRun",
    "ArtifactsList",
    "AuthorAssociation",
    "Billable",
    "BillableRun",
    "CacheUsage",
    "CommitProfile",
    "GitHubApp",
    "GitHubPublicKey",
    "GitHubToken",
    "HeadCommit",
    "Installation",
    "InstallationAccessToken",
    "Issue",
    "IssueState",
    "Job",
    "JobRun",
    "JobStatus",
    "JobsList",
    "Label",
    "LabelType",
    "LockReason",
    "Milestone",
    "OrganizationSecret",
    "OrganizationSecretsList",
    "PermissionType",
    "PullRequestPart",
    "ReferencedWorkflow",
    "RepositoriesCacheUsagesList",
    "Repository",
    "RepositoryCacheUsage",
    "RepositoryCachesList",
    "RepositoryRef",
    "RepositorySelection",
    "RunPullRequest",
    "Runner",
    "RunnerLabel",
    "RunnerLabelsList",
    "RunnerStatus",
    "RunnersList",
    "Secret",
    "SecretsList",
    "Step",
    "User",
    "Visibility",
    "Workflow",
    "WorkflowRun",
    "WorkflowRunStatus",
    "WorkflowRunUsage",
    "WorkflowRunsList",
    "WorkflowState",
    "WorkflowUsage",
    "WorkflowsList",
]
