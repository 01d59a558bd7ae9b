"""Base class for endpoint managers.

This module provides the base class every resource-group manager
inherits from. It owns the shared request flow:

1. send the request through the transport;
2. turn any transport failure into a ``GitHubResult`` carrying the
   call's sentinel and an ``ErrorDetail``;
3. otherwise hand the body back as text, parsed JSON or a hydrated
   record, as the caller's ``ReturnFormat`` asks.

Hydration errors are not transport failures and propagate unchanged.

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from github_manager.auth import create_auth
from github_manager.config import ClientConfig
from github_manager.exceptions import (
    AuthenticationError,
    DocumentShapeError,
    GitHubError,
    UnexpectedStatusError,
)
from github_manager.hydration import GitHubRecord
from github_manager.result import ErrorDetail, GitHubResult, ReturnFormat
from github_manager.utils.http import HTTPClient

if TYPE_CHECKING:
    import httpx

    from github_manager.utils.http import HTTPResponse

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="BaseManager")
T = TypeVar("T", bound=GitHubRecord)


def segment(value: Any) -> str:
    """Percent-encode ``value`` as a single URL path segment.

    ``/``, ``?`` and ``#`` are escaped too, so a caller-supplied name can
    never change which endpoint a request reaches.

    """
    return quote(str(value), safe="")


def repo_path(owner: str, repo: str) -> str:
    """Return the encoded ``/repos/{owner}/{repo}`` prefix."""
    return f"/repos/{segment(owner)}/{segment(repo)}"


def identifier(value: Any, attribute: str = "id") -> str:
    """Return the encoded path identifier for ``value``.

    Managers accept either a raw identifier or the record it came from,
    so ``get_artifact(owner, repo, artifact)`` and
    ``get_artifact(owner, repo, artifact.id)`` are equivalent.

    """
    if isinstance(value, GitHubRecord):
        value = getattr(value, attribute)
    return segment(value)


class BaseManager:
    """Base class for resource-group managers.

    Each manager (artifacts, workflows, etc.) inherits from this class
    to get access to the transport and the shared request helpers.

    Attributes:
        _http: The HTTP client for making requests.
        _config: Client configuration.

    """

    __slots__ = ("_config", "_http")

    def __init__(self, http: HTTPClient, config: ClientConfig) -> None:
        """Initialize the manager with HTTP client and config.

        Args:
            http: The HTTP client for making requests.
            config: Client configuration.

        """
        self._http = http
        self._config = config

    @classmethod
    def create(
        cls: type[M],
        token: str | None = None,
        *,
        timeout: float | None = None,
        default_error_message: str | None = None,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> M:
        """Build a standalone manager with its own transport.

        Unset arguments fall back to the environment (``GITHUB_TOKEN``,
        ``GITHUB_TIMEOUT``, ...) and then to the library defaults.

        Args:
            token: Personal access token or installation token.
            timeout: Request timeout in seconds.
            default_error_message: Message reported instead of GitHub's own
                when a call fails.
            base_url: API root, for GitHub Enterprise Server.
            transport: Optional httpx transport.

        Raises:
            ConfigurationError: If a value is invalid.

        Example:
            >>> artifacts = ArtifactsManager.create("ghp_xxxx", timeout=10)

        """
        overrides = {
            "token": token,
            "timeout": timeout,
            "default_error_message": default_error_message,
            "base_url": base_url,
        }
        config = ClientConfig(**{key: value for key, value in overrides.items() if value is not None})
        http = HTTPClient(config, create_auth(config.token), transport=transport)
        return cls(http, config)

    def close(self) -> None:
        """Close the underlying transport."""
        self._http.close()

    # =========================================================================
    # Request helpers
    # =========================================================================

    def _send(
        self,
        method: str,
        endpoint: str,
        *,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | list[Any] | None = None,
        follow_redirects: bool = True,
    ) -> HTTPResponse:
        if method == "GET":
            return self._http.send_get(endpoint, params, follow_redirects=follow_redirects)
        if method == "POST":
            return self._http.send_post(endpoint, json_data)
        if method == "PUT":
            return self._http.send_put(endpoint, json_data)
        if method == "PATCH":
            return self._http.send_patch(endpoint, json_data)
        if method == "DELETE":
            return self._http.send_delete(endpoint, params)
        raise ValueError(f"Unsupported HTTP method: {method}")

    def _fail(self, error: GitHubError, sentinel: Any) -> GitHubResult[Any]:
        """Turn a transport failure into a result carrying ``sentinel``."""
        logger.warning("%s request failed: %s", type(self).__name__, error.message)
        return GitHubResult(
            value=sentinel,
            error=ErrorDetail.from_exception(error, self._config.default_error_message),
            status_code=error.status_code,
        )

    def _require_auth(self, action: str, sentinel: Any = None) -> GitHubResult[Any] | None:
        """Return a failed result if the manager has no credentials, else None."""
        if self._config.is_authenticated:
            return None
        return self._fail(AuthenticationError(f"Authentication required to {action}"), sentinel)

    def _returner(
        self,
        response: HTTPResponse,
        model: type[T],
        format: ReturnFormat,
        *,
        many: bool = False,
    ) -> GitHubResult[Any]:
        """Format a successful response as the caller asked.

        Args:
            response: The transport response.
            model: Record type for ``LIBRARY_OBJECT``.
            format: Requested return format.
            many: Whether the body is a JSON array of ``model``.

        Raises:
            DocumentShapeError: If the body cannot be parsed or has the
                wrong top-level shape.
            MalformedEnumError: If an enum field holds an unknown value.

        """
        if format is ReturnFormat.STRING:
            return GitHubResult(value=response.text, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise DocumentShapeError(f"Response is not valid JSON: {e}", record=model.__name__) from e

        if format is ReturnFormat.JSON:
            return GitHubResult(value=data, status_code=response.status_code)

        if many:
            if not isinstance(data, list):
                raise DocumentShapeError(
                    f"Expected a JSON array of {model.__name__}, got {type(data).__name__}",
                    record=model.__name__,
                )
            value: Any = model.list_from_documents(data)
        else:
            value = model.from_document(data)
        return GitHubResult(value=value, status_code=response.status_code)

    def _request(
        self,
        method: str,
        endpoint: str,
        model: type[T],
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | list[Any] | None = None,
        many: bool = False,
        expected: int | None = None,
    ) -> GitHubResult[Any]:
        sentinel: Any = [] if many else None
        try:
            response = self._send(method, endpoint, params=params, json_data=json_data)
        except GitHubError as e:
            return self._fail(e, sentinel)
        if expected is not None and response.status_code != expected:
            return self._fail(UnexpectedStatusError(response.status_code, expected), sentinel)
        return self._returner(response, model, format, many=many)

    def _get(
        self,
        endpoint: str,
        model: type[T],
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
        params: dict[str, Any] | None = None,
        many: bool = False,
    ) -> GitHubResult[Any]:
        """GET ``endpoint`` and format the body as ``model``."""
        return self._request("GET", endpoint, model, format=format, params=params, many=many)

    def _post(
        self,
        endpoint: str,
        model: type[T],
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
        json_data: dict[str, Any] | list[Any] | None = None,
        expected: int | None = None,
    ) -> GitHubResult[Any]:
        """POST ``json_data`` to ``endpoint`` and format the body as ``model``."""
        return self._request("POST", endpoint, model, format=format, json_data=json_data, expected=expected)

    def _put(
        self,
        endpoint: str,
        model: type[T],
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
        json_data: dict[str, Any] | list[Any] | None = None,
    ) -> GitHubResult[Any]:
        """PUT ``json_data`` to ``endpoint`` and format the body as ``model``."""
        return self._request("PUT", endpoint, model, format=format, json_data=json_data)

    def _patch(
        self,
        endpoint: str,
        model: type[T],
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
        json_data: dict[str, Any] | list[Any] | None = None,
    ) -> GitHubResult[Any]:
        """PATCH ``endpoint`` with ``json_data`` and format the body as ``model``."""
        return self._request("PATCH", endpoint, model, format=format, json_data=json_data)

    def _delete(
        self,
        endpoint: str,
        model: type[T],
        *,
        format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
        params: dict[str, Any] | None = None,
    ) -> GitHubResult[Any]:
        """DELETE ``endpoint`` when GitHub answers with a body."""
        return self._request("DELETE", endpoint, model, format=format, params=params)

    def _status_call(
        self,
        method: str,
        endpoint: str,
        *,
        expected: int = 204,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | list[Any] | None = None,
    ) -> GitHubResult[bool]:
        """Issue a request whose only outcome is its status code.

        Returns:
            ``True`` iff GitHub answered with ``expected``; otherwise
            ``False`` with the error attached.

        """
        try:
            response = self._send(method, endpoint, params=params, json_data=json_data)
        except GitHubError as e:
            return self._fail(e, False)
        if response.status_code != expected:
            return self._fail(UnexpectedStatusError(response.status_code, expected), False)
        return GitHubResult(value=True, status_code=response.status_code)

    def _location_call(self, endpoint: str, *, params: dict[str, Any] | None = None) -> GitHubResult[str | None]:
        """GET a redirecting endpoint and return its ``Location`` header."""
        try:
            response = self._send("GET", endpoint, params=params, follow_redirects=False)
        except GitHubError as e:
            return self._fail(e, None)
        if response.status_code != 302 or not response.location:
            return self._fail(UnexpectedStatusError(response.status_code, 302), None)
        return GitHubResult(value=response.location, status_code=response.status_code)

    def _build_pagination_params(
        self,
        page: int | None = None,
        per_page: int | None = None,
    ) -> dict[str, int]:
        """Build pagination query parameters.

        Args:
            page: Page number (1-indexed).
            per_page: Items per page (max 100).

        Returns:
            Dictionary of pagination parameters.

        """
        params: dict[str, int] = {}
        if page is not None:
            params["page"] = page
        if per_page is not None:
            params["per_page"] = min(per_page, self._config.MAX_PER_PAGE)
        elif self._config.per_page != self._config.DEFAULT_PER_PAGE:
            params["per_page"] = self._config.per_page
        return params

    def _query(
        self,
        page: int | None = None,
        per_page: int | None = None,
        **filters: Any,
    ) -> dict[str, Any]:
        """Build query parameters from the filters that were set, plus pagination."""
        params: dict[str, Any] = {key: value for key, value in filters.items() if value is not None}
        params.update(self._build_pagination_params(page, per_page))
        return params
