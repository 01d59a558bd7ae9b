"""GitHub Manager - typed records and managers for the GitHub REST API.

Responses hydrate into immutable records that tolerate missing and
malformed fields; only unknown enum values are rejected. Every manager
call returns a ``GitHubResult`` carrying either the value or the error.

Example:
    >>> from github_manager import GitHubClient
    >>> client = GitHubClient(token="ghp_xxx")
    >>> result = client.workflow_jobs.get_job("octocat", "hello", 399444496)
    >>> print(result.value.status if result.ok else result.error.message)

"""

from github_manager.client import GitHubClient
from github_manager.config import ClientConfig
from github_manager.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DocumentShapeError,
    GitHubError,
    HydrationError,
    MalformedEnumError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnexpectedStatusError,
    ValidationError,
)
from github_manager.hydration import GitHubList, GitHubRecord, GitHubResponse
from github_manager.result import ErrorDetail, ErrorKind, GitHubResult, ReturnFormat
from github_manager.utils.logger import configure_logging

__version__ = "1.0.0"

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ClientConfig",
    "ConfigurationError",
    "DocumentShapeError",
    "ErrorDetail",
    "ErrorKind",
    "GitHubClient",
    "GitHubError",
    "GitHubList",
    "GitHubRecord",
    "GitHubResponse",
    "GitHubResult",
    "HydrationError",
    "MalformedEnumError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ReturnFormat",
    "ServerError",
    "UnexpectedStatusError",
    "ValidationError",
    "configure_logging",
]
