"""Utility modules for the GitHub manager library.

- http: HTTP transport wrapper
- logger: Library logger configuration
- retry: Backoff policy for transient failures

"""

from github_manager.utils.http import HTTPClient, HTTPResponse
from github_manager.utils.logger import configure_logging
from github_manager.utils.retry import calculate_backoff, is_retryable_error

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "calculate_backoff",
    "configure_logging",
    "is_retryable_error",
]
