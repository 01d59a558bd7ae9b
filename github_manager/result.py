"""Per-call results returned by every manager method.

A manager call never raises for a transport failure. It returns a
``GitHubResult`` whose ``value`` is the sentinel for that call (None,
False or an empty list) and whose ``error`` describes what went wrong.
Each result owns its own error, so concurrent calls on one manager never
see each other's failures.

Example:
    >>> result = client.artifacts.get_artifact("octocat", "hello", 42)
    >>> if result.ok:
    ...     print(result.value.name)
    ... else:
    ...     print(result.error.kind, result.error.message)

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from github_manager.exceptions import (
    AuthenticationError,
    AuthorizationError,
    GitHubError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnexpectedStatusError,
    ValidationError,
)

T = TypeVar("T")


class ReturnFormat(Enum):
    """How a manager hands the response body back to the caller."""

    STRING = "string"
    JSON = "json"
    LIBRARY_OBJECT = "library_object"


class ErrorKind(Enum):
    """Category of a failed call."""

    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    NETWORK = "network"
    UNEXPECTED_STATUS = "unexpected_status"
    HTTP = "http"


# Subclasses before their bases; RateLimitError can carry a 403.
_ERROR_KINDS: tuple[tuple[type[GitHubError], ErrorKind], ...] = (
    (RateLimitError, ErrorKind.RATE_LIMIT),
    (AuthenticationError, ErrorKind.AUTHENTICATION),
    (AuthorizationError, ErrorKind.AUTHORIZATION),
    (NotFoundError, ErrorKind.NOT_FOUND),
    (ValidationError, ErrorKind.VALIDATION),
    (ServerError, ErrorKind.SERVER),
    (NetworkError, ErrorKind.NETWORK),
    (UnexpectedStatusError, ErrorKind.UNEXPECTED_STATUS),
)


@dataclass(frozen=True, slots=True)
class ErrorDetail:
    """Why a manager call failed.

    Attributes:
        kind: Category of the failure.
        message: Human-readable description, or the configured default
            error message when one is set.
        status_code: HTTP status, None for network failures.
        documentation_url: Link GitHub attached to the error body, if any.

    """

    kind: ErrorKind
    message: str
    status_code: int | None = None
    documentation_url: str | None = None

    @classmethod
    def from_exception(cls, error: GitHubError, message: str | None = None) -> ErrorDetail:
        """Build the detail for a transport exception.

        Args:
            error: The exception raised by the transport.
            message: Replacement for the exception's own message.

        """
        kind = ErrorKind.HTTP
        for error_type, error_kind in _ERROR_KINDS:
            if isinstance(error, error_type):
                kind = error_kind
                break
        return cls(
            kind=kind,
            message=message or error.message,
            status_code=error.status_code,
            documentation_url=error.documentation_url,
        )


@dataclass(frozen=True, slots=True)
class GitHubResult(Generic[T]):
    """Outcome of one manager call.

    Attributes:
        value: The record, parsed JSON, text or flag the call produced,
            or the call's sentinel when it failed.
        error: Failure details, None on success.
        status_code: HTTP status of the final response, when there was one.

    """

    value: T
    error: ErrorDetail | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        """Whether the call succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return ``value``, raising if the call failed.

        Raises:
            GitHubError: Carrying the failure's message and status.

        """
        if self.error is not None:
            error = GitHubError(
                self.error.message,
                {"documentation_url": self.error.documentation_url} if self.error.documentation_url else None,
            )
            error.status_code = self.error.status_code
            raise error
        return self.value
