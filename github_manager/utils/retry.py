"""Backoff policy for transient transport failures.

Retry Conditions:
    - 429 Too Many Requests / 403 rate limit (respects Retry-After)
    - 500, 502, 503, 504 Server Errors
    - Network errors classified as retryable

Everything else (400, 401, 403, 404, 422, DNS failures) fails fast.

"""

from __future__ import annotations

import random
import time

from github_manager.exceptions import NetworkError, RateLimitError, ServerError

RETRYABLE_STATUS_CODES = frozenset({429, 500, 502, 503, 504})


def is_retryable_error(error: Exception) -> bool:
    """Determine if an error should trigger a retry.

    Args:
        error: The exception to check.

    Returns:
        True if the error is transient and retryable.

    """
    if isinstance(error, RateLimitError):
        return True

    if isinstance(error, ServerError):
        return error.status_code in RETRYABLE_STATUS_CODES

    if isinstance(error, NetworkError):
        return error.is_retryable

    return False


def calculate_backoff(
    attempt: int,
    base_delay: float = 1.0,
    factor: float = 2.0,
    max_delay: float = 60.0,
    jitter: bool = True,
) -> float:
    """Calculate delay for exponential backoff.

    Args:
        attempt: Current attempt number (0-indexed).
        base_delay: Initial delay in seconds.
        factor: Exponential factor.
        max_delay: Maximum delay cap.
        jitter: Add ±25% randomness.

    Returns:
        Delay in seconds before next retry.

    """
    delay = min(base_delay * (factor**attempt), max_delay)

    if jitter:
        delay = delay * (0.75 + random.random() * 0.5)  # nosec B311

    return delay


def get_retry_after(error: RateLimitError, max_delay: float = 60.0) -> float | None:
    """Extract the server-requested delay from a RateLimitError.

    Args:
        error: The rate limit error.
        max_delay: Upper bound for the returned delay.

    Returns:
        Seconds to wait, or None if the response did not say.

    """
    if error.retry_after:
        return min(float(error.retry_after), max_delay)

    if error.reset_at:
        wait_time = error.reset_at.timestamp() - time.time()
        return min(max(0.0, wait_time), max_delay)

    return None
