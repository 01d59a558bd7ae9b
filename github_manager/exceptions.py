"""Exception hierarchy for the GitHub manager library.

Two families of errors live here and they travel differently:

- Hydration errors are raised while a record is built from a document
  (a malformed enum value, a top-level document that is not an object).
  They always propagate to whoever asked for the record.
- Transport errors map HTTP status codes and network failures onto typed
  exceptions. The transport raises them, but managers catch them and turn
  them into an ``ErrorDetail`` on the returned ``GitHubResult``.

Exception Hierarchy:
    GitHubError (base)
    ├── ConfigurationError     - Invalid config values
    ├── HydrationError         - Record construction failed
    │   ├── MalformedEnumError - Enum value outside the declared symbol set
    │   └── DocumentShapeError - Top-level document is not an object
    ├── AuthenticationError    - 401, invalid/expired token
    ├── AuthorizationError     - 403, insufficient permissions
    ├── NotFoundError          - 404, resource doesn't exist
    ├── ValidationError        - 422, invalid request payload
    ├── RateLimitError         - 429/403 rate limit exceeded
    ├── ServerError            - 5xx server errors
    └── NetworkError           - Connection failures, timeouts

Example:
    >>> try:
    ...     job = Job.from_document({"status": "bogus_value"})
    ... except MalformedEnumError as e:
    ...     print(e.field, e.value, e.allowed)

"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any


class GitHubError(Exception):
    """Base exception for all errors raised by this library.

    Attributes:
        message: Human-readable error description.
        response_data: Raw response data from the API, if available.

    """

    status_code: int | None = None

    def __init__(
        self,
        message: str,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            response_data: Raw response data from the API.

        """
        self.message = message
        self.response_data = response_data or {}
        super().__init__(message)

    @property
    def documentation_url(self) -> str | None:
        """Documentation link GitHub attaches to error bodies."""
        value = self.response_data.get("documentation_url")
        return value if isinstance(value, str) else None

    def __repr__(self) -> str:
        """Return a detailed representation for debugging."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class ConfigurationError(GitHubError):
    """Raised when client configuration is invalid.

    Example:
        >>> ClientConfig(base_url="not-a-url")
        ConfigurationError: Invalid base_url: not-a-url

    """


# =============================================================================
# Hydration Errors
# =============================================================================


class HydrationError(GitHubError):
    """Raised when a record cannot be built from a document.

    Attributes:
        record: Name of the record class being hydrated, if known.

    """

    def __init__(self, message: str, record: str | None = None) -> None:
        """Initialize hydration error.

        Args:
            message: Human-readable error description.
            record: Name of the record class being hydrated.

        """
        self.record = record
        super().__init__(message)


class MalformedEnumError(HydrationError):
    """Raised when an enum field holds a value outside its symbol set.

    Unlike other fields, which fall back to their defaults, an enum
    mismatch aborts construction of the enclosing record.

    Attributes:
        field: JSON key of the offending field.
        value: The raw value found in the document.
        allowed: The accepted symbols, in declaration order.

    Example:
        >>> Job.from_document({"status": "bogus_value"})
        MalformedEnumError: Malformed enum value 'bogus_value' for field 'status'

    """

    def __init__(
        self,
        field: str,
        value: object,
        allowed: Iterable[str],
        record: str | None = None,
    ) -> None:
        """Initialize malformed enum error.

        Args:
            field: JSON key of the offending field.
            value: The raw value found in the document.
            allowed: The accepted symbols.
            record: Name of the record class being hydrated.

        """
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        message = (
            f"Malformed enum value {value!r} for field {field!r} "
            f"(expected one of: {', '.join(self.allowed)})"
        )
        super().__init__(message, record=record)


class DocumentShapeError(HydrationError):
    """Raised when a top-level document is not a JSON object.

    Nested fields with the wrong shape fall back to their defaults; only
    the document handed to the record itself is checked strictly.

    """


# =============================================================================
# Transport Errors
# =============================================================================


class AuthenticationError(GitHubError):
    """Raised when authentication fails (HTTP 401).

    This typically indicates an invalid, expired, or revoked token.

    """

    status_code: int | None = 401

    def __init__(
        self,
        message: str = "Authentication failed",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize authentication error."""
        super().__init__(message, response_data)


class AuthorizationError(GitHubError):
    """Raised when the token lacks permission (HTTP 403).

    Attributes:
        required_scopes: Scopes needed for this operation, if known.

    """

    status_code: int | None = 403

    def __init__(
        self,
        message: str = "Permission denied",
        response_data: dict[str, Any] | None = None,
        required_scopes: list[str] | None = None,
    ) -> None:
        """Initialize authorization error.

        Args:
            message: Human-readable error description.
            response_data: Raw response data from the API.
            required_scopes: OAuth scopes required for this operation.

        """
        self.required_scopes = required_scopes or []
        super().__init__(message, response_data)


class NotFoundError(GitHubError):
    """Raised when a resource doesn't exist (HTTP 404).

    Note: GitHub also returns 404 for private resources the token
    cannot see.

    """

    status_code: int | None = 404

    def __init__(
        self,
        message: str = "Resource not found",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize not found error."""
        super().__init__(message, response_data)


class ValidationError(GitHubError):
    """Raised when the request payload is invalid (HTTP 422).

    Attributes:
        errors: List of field-level validation errors from GitHub.

    """

    status_code: int | None = 422

    def __init__(
        self,
        message: str = "Validation failed",
        response_data: dict[str, Any] | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize validation error.

        Args:
            message: Human-readable error description.
            response_data: Raw response data from the API.
            errors: List of field-level validation errors.

        """
        self.errors = errors or []
        super().__init__(message, response_data)

    @property
    def field_errors(self) -> dict[str, str]:
        """Return a mapping of field names to error messages."""
        return {
            error.get("field", "unknown"): error.get("message", "invalid") for error in self.errors
        }


class RateLimitError(GitHubError):
    """Raised when the API rate limit is exceeded (HTTP 429, or 403 with rate limit).

    Attributes:
        limit: Maximum requests allowed in the window.
        remaining: Requests remaining (usually 0 when this is raised).
        reset_at: When the rate limit resets.
        retry_after: Seconds until the limit resets.

    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        response_data: dict[str, Any] | None = None,
        status_code: int = 429,
        limit: int | None = None,
        remaining: int = 0,
        reset_at: datetime | None = None,
        retry_after: int | None = None,
    ) -> None:
        """Initialize rate limit error."""
        self.status_code = status_code
        self.limit = limit
        self.remaining = remaining
        self.reset_at = reset_at
        self.retry_after = retry_after
        super().__init__(message, response_data)

    def __str__(self) -> str:
        """Return a detailed error message with reset time."""
        base = self.message
        if self.reset_at:
            base += f" (resets at {self.reset_at.isoformat()})"
        if self.retry_after:
            base += f" (retry after {self.retry_after}s)"
        return base


class ServerError(GitHubError):
    """Raised when GitHub returns a server error (HTTP 5xx)."""

    def __init__(
        self,
        message: str = "GitHub server error",
        response_data: dict[str, Any] | None = None,
        status_code: int = 500,
    ) -> None:
        """Initialize server error."""
        self.status_code = status_code
        super().__init__(message, response_data)


class NetworkError(GitHubError):
    """Raised when a network-level error occurs.

    Attributes:
        original_error: The underlying exception that caused this error.
        is_retryable: Whether this error is likely transient.

    """

    def __init__(
        self,
        message: str = "Network error",
        original_error: Exception | None = None,
    ) -> None:
        """Initialize network error.

        Args:
            message: Human-readable error description.
            original_error: The underlying exception.

        """
        self.original_error = original_error
        self.is_retryable = self._classify_retryable(original_error)
        super().__init__(message, response_data=None)

    @staticmethod
    def _classify_retryable(error: Exception | None) -> bool:
        """Determine if the network error is likely transient."""
        if error is None:
            return True

        error_msg = str(error).lower()

        dns_indicators = [
            "failed to resolve",
            "nodename nor servname",
            "name or service not known",
            "getaddrinfo failed",
        ]
        if any(indicator in error_msg for indicator in dns_indicators):
            return False

        transient_indicators = [
            "connection refused",
            "connection reset",
            "broken pipe",
            "timed out",
            "timeout",
        ]
        return any(indicator in error_msg for indicator in transient_indicators)


class UnexpectedStatusError(GitHubError):
    """Raised when a call succeeds at the HTTP level with the wrong status.

    Status-only operations (deletes, cancels, re-runs) expect one precise
    code such as 204; anything else is reported through this error.

    """

    def __init__(
        self,
        status_code: int,
        expected: int,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unexpected status error."""
        self.status_code = status_code
        self.expected = expected
        super().__init__(f"Expected HTTP {expected}, got HTTP {status_code}", response_data)


# =============================================================================
# Exception Factory
# =============================================================================


def exception_from_response(
    status_code: int,
    response_data: dict[str, Any],
    headers: dict[str, str] | None = None,
) -> GitHubError:
    """Create the appropriate exception from an HTTP error response.

    Args:
        status_code: HTTP status code.
        response_data: Parsed JSON response body.
        headers: Response headers (for rate limit info).

    Returns:
        The appropriate GitHubError subclass.

    """
    headers = {key.lower(): value for key, value in (headers or {}).items()}
    message = str(response_data.get("message") or f"HTTP {status_code}")

    if status_code == 429 or (
        status_code == 403
        and ("rate limit" in message.lower() or headers.get("x-ratelimit-remaining") == "0")
    ):
        return _create_rate_limit_error(status_code, message, response_data, headers)

    if 500 <= status_code < 600:
        return ServerError(message=message, response_data=response_data, status_code=status_code)

    exception_map: dict[int, type[GitHubError]] = {
        401: AuthenticationError,
        403: AuthorizationError,
        404: NotFoundError,
    }

    if status_code in exception_map:
        return exception_map[status_code](message=message, response_data=response_data)

    if status_code == 422:
        errors = response_data.get("errors", [])
        if not isinstance(errors, list):
            errors = []
        return ValidationError(message=message, response_data=response_data, errors=errors)

    error = GitHubError(message=f"HTTP {status_code}: {message}", response_data=response_data)
    error.status_code = status_code
    return error


def _create_rate_limit_error(
    status_code: int,
    message: str,
    response_data: dict[str, Any],
    headers: dict[str, str],
) -> RateLimitError:
    """Create a RateLimitError with details from lower-cased headers."""
    limit = _int_header(headers, "x-ratelimit-limit") or None
    remaining = _int_header(headers, "x-ratelimit-remaining") or 0

    reset_timestamp = _int_header(headers, "x-ratelimit-reset")
    reset_at = datetime.fromtimestamp(reset_timestamp) if reset_timestamp else None

    retry_after = _int_header(headers, "retry-after")

    return RateLimitError(
        message=message,
        response_data=response_data,
        status_code=status_code,
        limit=limit,
        remaining=remaining,
        reset_at=reset_at,
        retry_after=retry_after,
    )


def _int_header(headers: dict[str, str], name: str) -> int | None:
    value = headers.get(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
