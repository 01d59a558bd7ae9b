"""HTTP transport for the GitHub API.

This module wraps httpx and is the only place that talks to the network.
It handles:
- Base URL, API version and User-Agent headers
- Authentication injection
- Mapping error statuses onto typed exceptions
- Retry with exponential backoff for transient failures

Managers call ``send_get``/``send_post``/``send_put``/``send_patch``/
``send_delete`` and receive an ``HTTPResponse`` that keeps the raw text,
so each manager can still decide whether the caller wants text, JSON or
a hydrated record.

"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from github_manager.exceptions import (
    GitHubError,
    NetworkError,
    RateLimitError,
    exception_from_response,
)
from github_manager.utils.retry import calculate_backoff, get_retry_after, is_retryable_error

if TYPE_CHECKING:
    from github_manager.auth import AuthStrategy
    from github_manager.config import ClientConfig

logger = logging.getLogger(__name__)


class HTTPClient:
    """Low-level HTTP client for GitHub API requests.

    Note:
        This is an internal class. Use GitHubClient or a manager's
        ``create`` constructor for the public API.

    """

    __slots__ = ("_auth", "_client", "_config")

    ACCEPT_HEADER = "application/vnd.github+json"
    API_VERSION_HEADER = "2022-11-28"

    def __init__(
        self,
        config: ClientConfig,
        auth: AuthStrategy,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the HTTP client.

        Args:
            config: Client configuration.
            auth: Authentication strategy.
            transport: Optional httpx transport (tests pass a MockTransport).

        """
        self._config = config
        self._auth = auth
        self._client = self._create_client(transport)

    @property
    def is_authenticated(self) -> bool:
        """Whether requests carry credentials."""
        return self._auth.is_authenticated

    def _create_client(self, transport: httpx.BaseTransport | None) -> httpx.Client:
        """Create and configure the httpx client."""
        return httpx.Client(
            base_url=self._config.base_url,
            timeout=httpx.Timeout(self._config.timeout),
            headers={
                "Accept": self.ACCEPT_HEADER,
                "X-GitHub-Api-Version": self.API_VERSION_HEADER,
                "User-Agent": self._config.user_agent,
            },
            transport=transport,
        )

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | list[Any] | None = None,
        follow_redirects: bool = True,
    ) -> HTTPResponse:
        """Make an HTTP request to the GitHub API, retrying transient failures.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE).
            endpoint: API endpoint path (e.g., "/repos/octocat/hello/actions/artifacts").
            params: Query parameters. ``None`` values are dropped.
            json_data: JSON body for POST/PUT/PATCH requests.
            follow_redirects: Set to False to read a redirect's Location
                instead of following it.

        Returns:
            HTTPResponse with the raw text and metadata.

        Raises:
            GitHubError: For API errors (4xx, 5xx).
            NetworkError: For connection failures.

        """
        if params:
            params = {key: value for key, value in params.items() if value is not None}

        max_attempts = self._config.max_retries + 1

        for attempt in range(max_attempts):
            try:
                return self._execute_request(method, endpoint, params, json_data, follow_redirects)
            except GitHubError as e:
                if not is_retryable_error(e):
                    raise

                if attempt >= max_attempts - 1:
                    logger.warning(
                        "Max retries (%d) exhausted for %s %s",
                        max_attempts - 1,
                        method,
                        endpoint,
                    )
                    raise

                delay = None
                if isinstance(e, RateLimitError):
                    delay = get_retry_after(e)
                if delay is None:
                    delay = calculate_backoff(
                        attempt,
                        base_delay=1.0,
                        factor=self._config.retry_backoff_factor,
                    )

                logger.info(
                    "Retry %d/%d for %s %s after %.2fs: %s",
                    attempt + 1,
                    max_attempts - 1,
                    method,
                    endpoint,
                    delay,
                    str(e),
                )

                time.sleep(delay)

        raise RuntimeError("Unexpected retry loop exit")

    def _execute_request(
        self,
        method: str,
        endpoint: str,
        params: dict[str, Any] | None,
        json_data: dict[str, Any] | list[Any] | None,
        follow_redirects: bool,
    ) -> HTTPResponse:
        """Execute a single HTTP request."""
        request = self._client.build_request(
            method=method,
            url=endpoint,
            params=params,
            json=json_data,
        )
        request = self._auth.apply(request)

        logger.debug("Request: %s %s", method, request.url)

        try:
            response = self._client.send(request, follow_redirects=follow_redirects)
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request timed out: {e}", original_error=e) from e
        except httpx.ConnectError as e:
            raise NetworkError(f"Connection failed: {e}", original_error=e) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"HTTP error: {e}", original_error=e) from e

        return self._process_response(response)

    def _process_response(self, response: httpx.Response) -> HTTPResponse:
        """Wrap the response, raising a typed exception for error statuses."""
        headers = {key.lower(): value for key, value in response.headers.items()}
        result = HTTPResponse(
            text=response.text,
            status_code=response.status_code,
            headers=headers,
        )

        logger.debug(
            "Response: %d %s (remaining: %s)",
            response.status_code,
            response.reason_phrase,
            headers.get("x-ratelimit-remaining", "N/A"),
        )

        if response.status_code >= 400:
            try:
                data = result.json()
            except ValueError:
                data = None
            error_data = data if isinstance(data, dict) else {"message": result.text or None}
            raise exception_from_response(
                status_code=response.status_code,
                response_data=error_data,
                headers=headers,
            )

        return result

    def send_get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        *,
        follow_redirects: bool = True,
    ) -> HTTPResponse:
        """Make a GET request."""
        return self.request("GET", endpoint, params=params, follow_redirects=follow_redirects)

    def send_post(
        self,
        endpoint: str,
        json_data: dict[str, Any] | list[Any] | None = None,
    ) -> HTTPResponse:
        """Make a POST request."""
        return self.request("POST", endpoint, json_data=json_data)

    def send_put(
        self,
        endpoint: str,
        json_data: dict[str, Any] | list[Any] | None = None,
    ) -> HTTPResponse:
        """Make a PUT request."""
        return self.request("PUT", endpoint, json_data=json_data)

    def send_patch(
        self,
        endpoint: str,
        json_data: dict[str, Any] | list[Any] | None = None,
    ) -> HTTPResponse:
        """Make a PATCH request."""
        return self.request("PATCH", endpoint, json_data=json_data)

    def send_delete(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> HTTPResponse:
        """Make a DELETE request."""
        return self.request("DELETE", endpoint, params=params)

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> HTTPClient:
        """Enter context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Exit context manager and close client."""
        self.close()


class HTTPResponse:
    """Raw response text plus the metadata managers need.

    Attributes:
        text: Response body as received.
        status_code: HTTP status code.
        headers: Response headers with lower-cased names.

    """

    __slots__ = ("headers", "status_code", "text")

    def __init__(
        self,
        text: str,
        status_code: int,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize the response container."""
        self.text = text
        self.status_code = status_code
        self.headers = {key.lower(): value for key, value in (headers or {}).items()}

    def json(self) -> Any:
        """Parse the body as JSON.

        An empty body (204 No Content and friends) parses as an empty object.

        Raises:
            ValueError: If the body is not valid JSON.

        """
        if not self.text or not self.text.strip():
            return {}
        return json.loads(self.text)

    @property
    def location(self) -> str | None:
        """Location header of a redirect response."""
        return self.headers.get("location")

    @property
    def link_header(self) -> str | None:
        """Link header for pagination."""
        return self.headers.get("link")

    @property
    def rate_limit_remaining(self) -> int | None:
        """Get remaining rate limit from headers."""
        value = self.headers.get("x-ratelimit-remaining")
        return int(value) if value else None

    def __repr__(self) -> str:
        """Return a representation of the response."""
        return f"HTTPResponse(status={self.status_code}, length={len(self.text)})"
