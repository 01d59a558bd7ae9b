"""Authentication strategies for the GitHub API.

Every manager is built around one credential. The transport asks its
strategy to decorate each outgoing request; the hydration layer never
sees it.

Supported Authentication Methods:
    - TokenAuth: Bearer token (personal access token, app or installation token)
    - NoAuth: Unauthenticated requests (lower rate limits)

Example:
    >>> auth = create_auth("ghp_xxxxxxxxxxxx")
    >>> auth.is_authenticated
    True

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class AuthStrategy(ABC):
    """Abstract base class for authentication strategies."""

    @abstractmethod
    def apply(self, request: httpx.Request) -> httpx.Request:
        """Apply authentication to an outgoing request.

        Args:
            request: The httpx request to authenticate.

        Returns:
            The request with authentication applied.

        """

    @property
    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if this strategy provides authentication."""


class TokenAuth(AuthStrategy):
    """Bearer token authentication.

    Works for personal access tokens, GitHub App JWTs and installation
    access tokens alike: all of them travel in the Authorization header.

    """

    __slots__ = ("_token",)

    def __init__(self, token: str) -> None:
        """Initialize with a bearer token.

        Raises:
            ValueError: If token is empty or None.

        """
        if not token or not token.strip():
            raise ValueError("Token cannot be empty")
        self._token = token.strip()

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Set the Authorization header on the request."""
        request.headers["Authorization"] = f"Bearer {self._token}"
        return request

    @property
    def is_authenticated(self) -> bool:
        """Return True as this strategy provides authentication."""
        return True

    def __repr__(self) -> str:
        """Return a safe representation without exposing the token."""
        masked = f"{self._token[:4]}..." if len(self._token) > 4 else "***"
        return f"TokenAuth(token={masked!r})"


class NoAuth(AuthStrategy):
    """No authentication (anonymous requests)."""

    __slots__ = ()

    def apply(self, request: httpx.Request) -> httpx.Request:
        """Return the request unchanged."""
        return request

    @property
    def is_authenticated(self) -> bool:
        """Return False as this strategy provides no authentication."""
        return False

    def __repr__(self) -> str:
        """Return a simple representation."""
        return "NoAuth()"


def create_auth(token: str | None) -> AuthStrategy:
    """Create the appropriate auth strategy for a token.

    Args:
        token: Bearer token, or None for unauthenticated access.

    Returns:
        TokenAuth if token provided, NoAuth otherwise.

    """
    if token:
        return TokenAuth(token)
    return NoAuth()
