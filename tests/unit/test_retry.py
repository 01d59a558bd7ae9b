"""Unit tests for the retry module."""

from __future__ import annotations

from datetime import datetime, timedelta

from github_manager.exceptions import (
    AuthenticationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnexpectedStatusError,
)
from github_manager.utils.retry import calculate_backoff, get_retry_after, is_retryable_error


class TestIsRetryableError:
    """Tests for is_retryable_error function."""

    def test_rate_limit_error_is_retryable(self):
        """RateLimitError should be retryable."""
        error = RateLimitError("Rate limit exceeded")
        assert is_retryable_error(error) is True

    def test_server_error_500_is_retryable(self):
        """Server 500 error should be retryable."""
        error = ServerError("Internal server error", status_code=500)
        assert is_retryable_error(error) is True

    def test_server_error_503_is_retryable(self):
        """Server 503 error should be retryable."""
        error = ServerError("Service unavailable", status_code=503)
        assert is_retryable_error(error) is True

    def test_server_error_501_not_retryable(self):
        """Not Implemented will not get better on retry."""
        error = ServerError("Not implemented", status_code=501)
        assert is_retryable_error(error) is False

    def test_network_error_timeout_is_retryable(self):
        """Network timeout should be retryable."""
        error = NetworkError("Connection timed out")
        error.is_retryable = True
        assert is_retryable_error(error) is True

    def test_network_error_dns_not_retryable(self):
        """DNS errors should not be retryable."""
        error = NetworkError("Failed to resolve hostname")
        error.is_retryable = False
        assert is_retryable_error(error) is False

    def test_authentication_error_not_retryable(self):
        """Authentication errors should not be retryable."""
        error = AuthenticationError("Bad credentials")
        assert is_retryable_error(error) is False

    def test_not_found_error_not_retryable(self):
        """Not found errors should not be retryable."""
        error = NotFoundError("Resource not found")
        assert is_retryable_error(error) is False

    def test_unexpected_status_not_retryable(self):
        """A wrong success status is final."""
        assert is_retryable_error(UnexpectedStatusError(200, 204)) is False


class TestCalculateBackoff:
    """Tests for calculate_backoff function."""

    def test_first_attempt_uses_base_delay(self):
        """First attempt should use base delay."""
        delay = calculate_backoff(0, base_delay=1.0, factor=2.0, jitter=False)
        assert delay == 1.0

    def test_exponential_increase(self):
        """Delay should increase exponentially."""
        delay0 = calculate_backoff(0, base_delay=1.0, factor=2.0, jitter=False)
        delay1 = calculate_backoff(1, base_delay=1.0, factor=2.0, jitter=False)
        delay2 = calculate_backoff(2, base_delay=1.0, factor=2.0, jitter=False)

        assert delay0 == 1.0
        assert delay1 == 2.0
        assert delay2 == 4.0

    def test_max_delay_caps_value(self):
        """Delay should not exceed max_delay."""
        delay = calculate_backoff(10, base_delay=1.0, factor=2.0, max_delay=30.0, jitter=False)
        assert delay == 30.0

    def test_jitter_stays_in_range(self):
        """Jitter should keep the delay within ±25%."""
        delays = [calculate_backoff(1, base_delay=1.0, factor=2.0, jitter=True) for _ in range(10)]
        for delay in delays:
            assert 1.5 <= delay <= 2.5  # 2.0 * (0.75 to 1.25)


class TestGetRetryAfter:
    """Tests for get_retry_after function."""

    def test_retry_after_header(self):
        """Retry-After wins when present."""
        assert get_retry_after(RateLimitError("Rate limited", retry_after=5)) == 5.0

    def test_retry_after_is_capped(self):
        assert get_retry_after(RateLimitError("Rate limited", retry_after=3600), max_delay=60.0) == 60.0

    def test_reset_time_in_the_past(self):
        """A reset time that already passed means no wait."""
        error = RateLimitError("Rate limited", reset_at=datetime.now() - timedelta(minutes=5))
        assert get_retry_after(error) == 0.0

    def test_no_hint(self):
        assert get_retry_after(RateLimitError("Rate limited")) is None
