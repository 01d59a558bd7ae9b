"""Test configuration and shared fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from github_manager import ClientConfig
from github_manager.utils.http import HTTPClient, HTTPResponse

# =============================================================================
# Sample API Responses
# =============================================================================


@pytest.fixture
def sample_user_response() -> dict[str, Any]:
    """Sample GitHub user object as embedded in other resources."""
    return {
        "login": "octocat",
        "id": 1,
        "node_id": "MDQ6VXNlcjE=",
        "avatar_url": "https://github.com/images/error/octocat_happy.gif",
        "gravatar_id": "",
        "url": "https://api.github.com/users/octocat",
        "html_url": "https://github.com/octocat",
        "followers_url": "https://api.github.com/users/octocat/followers",
        "type": "User",
        "site_admin": False,
    }


@pytest.fixture
def sample_artifact_response() -> dict[str, Any]:
    """Sample GitHub artifact API response."""
    return {
        "id": 11,
        "node_id": "MDg6QXJ0aWZhY3QxMQ==",
        "name": "Rails",
        "size_in_bytes": 556,
        "url": "https://api.github.com/repos/octo-org/octo-docs/actions/artifacts/11",
        "archive_download_url": "https://api.github.com/repos/octo-org/octo-docs/actions/artifacts/11/zip",
        "expired": False,
        "created_at": "2020-01-10T14:59:22Z",
        "expires_at": "2020-03-21T14:59:22Z",
        "updated_at": "2020-02-21T14:59:22Z",
        "workflow_run": {
            "id": 2332938,
            "repository_id": 1296269,
            "head_repository_id": 1296269,
            "head_branch": "main",
            "head_sha": "328faa0536e6fef19753d9d91dc96a9931694ce3",
        },
    }


@pytest.fixture
def sample_job_response() -> dict[str, Any]:
    """Sample GitHub workflow job API response."""
    return {
        "id": 399444496,
        "run_id": 29679449,
        "run_url": "https://api.github.com/repos/octo-org/octo-repo/actions/runs/29679449",
        "node_id": "MDEyOldvcmtmbG93IEpvYjM5OTQ0NDQ5Ng==",
        "head_sha": "f83a356604ae3c5d03e1b46ef4d1ca77d64a90b0",
        "url": "https://api.github.com/repos/octo-org/octo-repo/actions/jobs/399444496",
        "html_url": "https://github.com/octo-org/octo-repo/runs/399444496",
        "status": "completed",
        "conclusion": "success",
        "started_at": "2020-01-20T17:42:40Z",
        "completed_at": "2020-01-20T17:44:39Z",
        "name": "build",
        "steps": [
            {
                "name": "Set up job",
                "status": "completed",
                "conclusion": "success",
                "number": 1,
                "started_at": "2020-01-20T09:42:40.000-08:00",
                "completed_at": "2020-01-20T09:42:41.000-08:00",
            },
            {
                "name": "Run actions/checkout@v2",
                "status": "completed",
                "conclusion": "success",
                "number": 2,
                "started_at": "2020-01-20T09:42:41.000-08:00",
                "completed_at": "2020-01-20T09:42:45.000-08:00",
            },
        ],
        "check_run_url": "https://api.github.com/repos/octo-org/octo-repo/check-runs/399444496",
        "labels": ["self-hosted", "foo", "bar"],
        "runner_id": 1,
        "runner_name": "my runner",
        "runner_group_id": 2,
        "runner_group_name": "my runner group",
        "workflow_name": "CI",
        "head_branch": "main",
    }


@pytest.fixture
def sample_workflow_run_response(sample_user_response: dict[str, Any]) -> dict[str, Any]:
    """Sample GitHub workflow run API response."""
    return {
        "id": 30433642,
        "name": "Build",
        "node_id": "MDEyOldvcmtmbG93IFJ1bjI2OTI4OQ==",
        "check_suite_id": 42,
        "head_branch": "main",
        "head_sha": "acb5820ced9479c074f688cc328bf03f341a511d",
        "path": ".github/workflows/build.yml@main",
        "run_number": 562,
        "event": "push",
        "display_title": "Update README.md",
        "status": "queued",
        "conclusion": None,
        "workflow_id": 159038,
        "url": "https://api.github.com/repos/octo-org/octo-repo/actions/runs/30433642",
        "pull_requests": [],
        "created_at": "2020-01-22T19:33:08Z",
        "updated_at": "2020-01-22T19:33:08Z",
        "actor": sample_user_response,
        "run_attempt": 1,
        "referenced_workflows": [
            {
                "path": "octocat/Hello-World/.github/workflows/deploy.yml@main",
                "sha": "86e8bc9ecf7d38b1ed2d2cfb8eb87ba9b35b01db",
                "ref": "refs/heads/main",
            }
        ],
        "run_started_at": "2020-01-22T19:33:08Z",
        "triggering_actor": sample_user_response,
        "head_commit": {
            "id": "acb5820ced9479c074f688cc328bf03f341a511d",
            "tree_id": "d23f6eedb1e1b9610bbc754ddb5197bfe7271223",
            "message": "Create linter.yaml",
            "timestamp": "2020-01-22T19:33:05Z",
            "author": {"name": "Octo Cat", "email": "octocat@github.com"},
            "committer": {"name": "GitHub", "email": "noreply@github.com"},
        },
        "repository": {
            "id": 1296269,
            "name": "Hello-World",
            "full_name": "octocat/Hello-World",
            "owner": sample_user_response,
            "private": False,
        },
    }


@pytest.fixture
def sample_runner_response() -> dict[str, Any]:
    """Sample self-hosted runner API response."""
    return {
        "id": 23,
        "name": "MBP",
        "os": "macos",
        "status": "online",
        "busy": True,
        "labels": [
            {"id": 5, "name": "self-hosted", "type": "read-only"},
            {"id": 7, "name": "X64", "type": "read-only"},
            {"id": 11, "name": "gpu", "type": "custom"},
        ],
    }


@pytest.fixture
def sample_installation_response(sample_user_response: dict[str, Any]) -> dict[str, Any]:
    """Sample GitHub App installation API response."""
    return {
        "id": 1,
        "account": sample_user_response,
        "access_tokens_url": "https://api.github.com/app/installations/1/access_tokens",
        "repositories_url": "https://api.github.com/installation/repositories",
        "html_url": "https://github.com/organizations/github/settings/installations/1",
        "app_id": 1,
        "target_id": 1,
        "target_type": "Organization",
        "permissions": {"checks": "write", "metadata": "read", "contents": "read"},
        "events": ["push", "pull_request"],
        "single_file_name": "config.yaml",
        "has_multiple_single_files": True,
        "single_file_paths": ["config.yml", ".github/issue_TEMPLATE.md"],
        "repository_selection": "selected",
        "created_at": "2017-07-08T16:18:44-04:00",
        "updated_at": "2017-07-08T16:18:44-04:00",
        "app_slug": "github-actions",
        "suspended_at": None,
        "suspended_by": None,
    }


@pytest.fixture
def sample_issue_response(sample_user_response: dict[str, Any]) -> dict[str, Any]:
    """Sample GitHub issue API response."""
    return {
        "id": 1,
        "node_id": "MDU6SXNzdWUx",
        "url": "https://api.github.com/repos/octocat/Hello-World/issues/1347",
        "repository_url": "https://api.github.com/repos/octocat/Hello-World",
        "html_url": "https://github.com/octocat/Hello-World/issues/1347",
        "number": 1347,
        "state": "open",
        "title": "Found a bug",
        "body": "I'm having a problem with this.",
        "user": sample_user_response,
        "labels": [
            {
                "id": 208045946,
                "node_id": "MDU6TGFiZWwyMDgwNDU5NDY=",
                "url": "https://api.github.com/repos/octocat/Hello-World/labels/bug",
                "name": "bug",
                "description": "Something isn't working",
                "color": "f29513",
                "default": True,
            }
        ],
        "assignee": None,
        "assignees": [],
        "milestone": None,
        "locked": True,
        "active_lock_reason": "too heated",
        "comments": 0,
        "pull_request": None,
        "closed_at": None,
        "created_at": "2011-04-22T13:33:48Z",
        "updated_at": "2011-04-22T13:33:48Z",
        "author_association": "COLLABORATOR",
    }


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def config() -> ClientConfig:
    """Create a test configuration."""
    return ClientConfig(
        token="test_token_12345",
        timeout=5.0,
        max_retries=0,
        default_error_message=None,
    )


@pytest.fixture
def unauthenticated_config() -> ClientConfig:
    """Create an unauthenticated test configuration."""
    return ClientConfig(
        token=None,
        timeout=5.0,
        max_retries=0,
        default_error_message=None,
    )


@pytest.fixture
def mock_http() -> MagicMock:
    """A stand-in transport whose send_* methods are programmed per test."""
    return MagicMock(spec=HTTPClient)


@pytest.fixture
def make_response() -> Callable[..., HTTPResponse]:
    """Build an HTTPResponse from a JSON-compatible body."""

    def _make(
        body: Any = None,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        text: str | None = None,
    ) -> HTTPResponse:
        if text is None:
            text = "" if body is None else json.dumps(body)
        return HTTPResponse(text=text, status_code=status_code, headers=headers)

    return _make


# =============================================================================
# Rate Limit Headers
# =============================================================================


@pytest.fixture
def rate_limit_exceeded_headers() -> dict[str, str]:
    """Rate limit exceeded headers."""
    return {
        "X-RateLimit-Limit": "5000",
        "X-RateLimit-Remaining": "0",
        "X-RateLimit-Reset": "1609459200",
        "X-RateLimit-Resource": "core",
        "Retry-After": "3600",
    }
