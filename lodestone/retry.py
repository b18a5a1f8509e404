"""Retry configuration for network calls (page fetches, definitions downloads)."""

from collections.abc import Callable
from typing import Any

import logfire
import requests
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

TRANSIENT_ERRORS: tuple[type[Exception], ...] = (requests.ConnectionError, requests.Timeout)


def get_retryer(
    max_attempts: int = 3,
    wait_min: float = 1.0,
    wait_max: float = 10.0,
    exceptions: tuple[type[Exception], ...] = TRANSIENT_ERRORS,
    log_callback: Callable[[Any], None] | None = None,
) -> Retrying:
    """Create a tenacity Retrying object for transient network failures.

    The last exception is re-raised once attempts run out.

    Args:
        max_attempts: Maximum number of attempts, including the first one.
        wait_min: Minimum wait between attempts in seconds.
        wait_max: Maximum wait between attempts in seconds.
        exceptions: Exception types worth another attempt.
        log_callback: Called before sleeping with the tenacity retry state.

    Returns:
        A configured tenacity.Retrying object.

    """
    return Retrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1.0, min=wait_min, max=wait_max),
        retry=retry_if_exception_type(exceptions),
        before_sleep=log_callback,
        reraise=True,
    )


def log_retry(retry_state: Any) -> None:
    """Log a retry with logfire."""
    exception = retry_state.outcome.exception()
    logfire.warn(
        'Retrying request',
        attempt=retry_state.attempt_number,
        error=str(exception) if exception else 'Unknown error',
    )
