"""Unit tests for the configuration module."""

from __future__ import annotations

import os
from dataclasses import FrozenInstanceError
from unittest.mock import patch

import pytest

from github_manager.config import ClientConfig
from github_manager.exceptions import ConfigurationError


class TestClientConfig:
    """Tests for the ClientConfig class."""

    def test_default_values(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = ClientConfig()

        assert config.base_url == "https://api.github.com"
        assert config.token is None
        assert config.timeout == 30.0
        assert config.max_retries == 3
        assert config.default_error_message is None
        assert config.per_page == 30

    def test_custom_values(self):
        """Test custom configuration values."""
        config = ClientConfig(
            base_url="https://github.example.com/api/v3",
            token="test_token",
            timeout=60.0,
            max_retries=5,
            default_error_message="GitHub is unavailable",
            per_page=50,
        )

        assert config.base_url == "https://github.example.com/api/v3"
        assert config.token == "test_token"
        assert config.timeout == 60.0
        assert config.max_retries == 5
        assert config.default_error_message == "GitHub is unavailable"
        assert config.per_page == 50

    def test_environment_variables(self):
        """Test values read from the environment."""
        env = {
            "GITHUB_TOKEN": "env_token",
            "GITHUB_BASE_URL": "https://custom.api.com",
            "GITHUB_TIMEOUT": "12.5",
            "GITHUB_MAX_RETRIES": "1",
            "GITHUB_ERROR_MESSAGE": "try again later",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ClientConfig()

        assert config.token == "env_token"
        assert config.base_url == "https://custom.api.com"
        assert config.timeout == 12.5
        assert config.max_retries == 1
        assert config.default_error_message == "try again later"

    def test_empty_environment_variable_is_unset(self):
        """Test an empty GITHUB_TOKEN means anonymous access."""
        with patch.dict(os.environ, {"GITHUB_TOKEN": ""}, clear=True):
            config = ClientConfig()

        assert config.token is None

    def test_constructor_overrides_env_var(self):
        """Test constructor value overrides environment variable."""
        with patch.dict(os.environ, {"GITHUB_TOKEN": "env_token"}):
            config = ClientConfig(token="constructor_token")

        assert config.token == "constructor_token"

    def test_is_authenticated_with_token(self):
        """Test is_authenticated returns True with token."""
        config = ClientConfig(token="test_token")
        assert config.is_authenticated is True

    def test_is_authenticated_without_token(self):
        """Test is_authenticated returns False without token."""
        with patch.dict(os.environ, {}, clear=True):
            config = ClientConfig()
        assert config.is_authenticated is False

    def test_trailing_slash_removed(self):
        """Test trailing slash is removed from base_url."""
        config = ClientConfig(base_url="https://api.github.com/")
        assert config.base_url == "https://api.github.com"

    def test_immutability(self):
        """Test configuration is immutable (frozen dataclass)."""
        config = ClientConfig()
        with pytest.raises(FrozenInstanceError):
            config.token = "new_token"  # type: ignore

    def test_with_overrides(self):
        """Test creating a new config with overrides."""
        original = ClientConfig(token="original", timeout=30.0, default_error_message=None)
        modified = original.with_overrides(timeout=60.0, default_error_message="oops")

        # Original unchanged
        assert original.timeout == 30.0
        assert original.default_error_message is None

        # Modified has new values
        assert modified.timeout == 60.0
        assert modified.default_error_message == "oops"
        assert modified.token == "original"  # Inherited

    def test_repr_masks_token(self):
        """Test the token never appears in repr."""
        config = ClientConfig(token="ghp_secret_value")

        assert "ghp_secret_value" not in repr(config)
        assert "'***'" in repr(config)


class TestConfigValidation:
    """Tests for configuration validation."""

    def test_invalid_base_url_empty(self):
        """Test empty base_url raises error."""
        with pytest.raises(ConfigurationError, match="cannot be empty"):
            ClientConfig(base_url="")

    def test_invalid_base_url_no_scheme(self):
        """Test base_url without scheme raises error."""
        with pytest.raises(ConfigurationError, match="must start with http"):
            ClientConfig(base_url="api.github.com")

    def test_invalid_timeout_zero(self):
        """Test zero timeout raises error."""
        with pytest.raises(ConfigurationError, match="timeout must be positive"):
            ClientConfig(timeout=0)

    def test_invalid_timeout_negative(self):
        """Test negative timeout raises error."""
        with pytest.raises(ConfigurationError, match="timeout must be positive"):
            ClientConfig(timeout=-1.0)

    def test_invalid_max_retries_negative(self):
        """Test negative max_retries raises error."""
        with pytest.raises(ConfigurationError, match="cannot be negative"):
            ClientConfig(max_retries=-1)

    def test_invalid_retry_backoff_factor(self):
        """Test backoff factor < 1.0 raises error."""
        with pytest.raises(ConfigurationError, match=r"must be >= 1\.0"):
            ClientConfig(retry_backoff_factor=0.5)

    @pytest.mark.parametrize("per_page", [0, 101])
    def test_invalid_per_page(self, per_page):
        """Test per_page outside 1..100 raises error."""
        with pytest.raises(ConfigurationError, match="per_page must be between 1 and 100"):
            ClientConfig(per_page=per_page)
