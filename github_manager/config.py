"""Configuration management for the GitHub manager library.

Configuration Precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables
    3. Default values

Environment Variables:
    GITHUB_TOKEN: Bearer token for authentication
    GITHUB_BASE_URL: API base URL (default: https://api.github.com)
    GITHUB_TIMEOUT: Request timeout in seconds (default: 30)
    GITHUB_MAX_RETRIES: Maximum retry attempts (default: 3)
    GITHUB_ERROR_MESSAGE: Message reported in place of GitHub's own on failed calls

Example:
    >>> config = ClientConfig(token="ghp_xxx", timeout=10.0)
    >>> quiet = config.with_overrides(default_error_message="GitHub is unavailable")

"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv

from github_manager.exceptions import ConfigurationError

# Auto-load .env file if it exists (searches current dir and parents)
_env_file = Path.cwd() / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    load_dotenv()


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable configuration shared by the transport and every manager.

    Attributes:
        base_url: GitHub API base URL.
        token: Bearer token for authentication.
        timeout: Request timeout in seconds.
        max_retries: Maximum number of retry attempts for transient failures.
        retry_backoff_factor: Exponential backoff multiplier between retries.
        default_error_message: When set, replaces the message of every
            ErrorDetail reported by a manager.
        user_agent: User-Agent header for requests.
        per_page: Default items per page for list endpoints.

    """

    DEFAULT_BASE_URL: ClassVar[str] = "https://api.github.com"
    DEFAULT_TIMEOUT: ClassVar[float] = 30.0
    DEFAULT_MAX_RETRIES: ClassVar[int] = 3
    DEFAULT_PER_PAGE: ClassVar[int] = 30
    MAX_PER_PAGE: ClassVar[int] = 100

    base_url: str = field(
        default_factory=lambda: _get_env("GITHUB_BASE_URL", ClientConfig.DEFAULT_BASE_URL)
    )
    token: str | None = field(default_factory=lambda: _get_env_optional("GITHUB_TOKEN"))
    timeout: float = field(
        default_factory=lambda: float(_get_env("GITHUB_TIMEOUT", str(ClientConfig.DEFAULT_TIMEOUT)))
    )
    max_retries: int = field(
        default_factory=lambda: int(
            _get_env("GITHUB_MAX_RETRIES", str(ClientConfig.DEFAULT_MAX_RETRIES))
        )
    )
    retry_backoff_factor: float = 1.5
    default_error_message: str | None = field(
        default_factory=lambda: _get_env_optional("GITHUB_ERROR_MESSAGE")
    )
    user_agent: str = "python-github-manager/1.0"
    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate all configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid.

        """
        if not self.base_url:
            raise ConfigurationError("base_url cannot be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Invalid base_url: {self.base_url} (must start with http:// or https://)"
            )

        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

        if self.max_retries < 0:
            raise ConfigurationError(f"max_retries cannot be negative, got {self.max_retries}")

        if self.retry_backoff_factor < 1.0:
            raise ConfigurationError(
                f"retry_backoff_factor must be >= 1.0, got {self.retry_backoff_factor}"
            )

        if not 1 <= self.per_page <= self.MAX_PER_PAGE:
            raise ConfigurationError(
                f"per_page must be between 1 and {self.MAX_PER_PAGE}, got {self.per_page}"
            )

    @property
    def is_authenticated(self) -> bool:
        """Check if the configuration includes authentication."""
        return self.token is not None and len(self.token) > 0

    def with_overrides(self, **kwargs: object) -> ClientConfig:
        """Create a new configuration with specified overrides.

        Args:
            **kwargs: Configuration values to override.

        Returns:
            A new ClientConfig with the specified overrides.

        """
        current_values: dict[str, object] = {
            "base_url": self.base_url,
            "token": self.token,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
            "retry_backoff_factor": self.retry_backoff_factor,
            "default_error_message": self.default_error_message,
            "user_agent": self.user_agent,
            "per_page": self.per_page,
        }
        current_values.update(kwargs)
        return ClientConfig(**current_values)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        """Return a representation that never exposes the token."""
        token = "***" if self.is_authenticated else None
        return (
            f"ClientConfig(base_url={self.base_url!r}, token={token!r}, "
            f"timeout={self.timeout!r}, max_retries={self.max_retries!r})"
        )


def _get_env(key: str, default: str) -> str:
    """Get environment variable with default."""
    value = os.environ.get(key)
    if value is None or value == "":
        return default
    return value


def _get_env_optional(key: str) -> str | None:
    """Get optional environment variable."""
    value = os.environ.get(key)
    if value is None or value == "":
        return None
    return value
