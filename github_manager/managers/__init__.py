"""Endpoint managers, one per GitHub resource group."""

from github_manager.managers.apps import AppsManager
from github_manager.managers.artifacts import ArtifactsManager
from github_manager.managers.base import BaseManager
from github_manager.managers.caches import CacheManager
from github_manager.managers.issues import IssuesManager
from github_manager.managers.jobs import WorkflowJobsManager
from github_manager.managers.runners import RunnersManager
from github_manager.managers.secrets import SecretsManager
from github_manager.managers.workflow_runs import WorkflowRunsManager
from github_manager.managers.workflows import WorkflowsManager

__all__ = [
    "AppsManager",
    "ArtifactsManager",
    "BaseManager",
    "CacheManager",
    "IssuesManager",
    "RunnersManager",
    "SecretsManager",
    "WorkflowJobsManager",
    "WorkflowRunsManager",
    "WorkflowsManager",
]
