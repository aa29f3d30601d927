"""Shared retry policy for page navigation and selector waits.

Both calls fail transiently on slow or flaky loads. They are retried a
bounded number of times with exponential backoff; once attempts run out
the last domain error is re-raised unchanged, so callers never see
``tenacity.RetryError``.
"""

from __future__ import annotations

import logging

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from ..config import MAX_RETRIES
from ..exceptions import NavigationError, SelectorTimeoutError

# tenacity's before_sleep_log requires a stdlib logger, NOT structlog.
_tenacity_logger = logging.getLogger("partner_catalog.retry")

RETRYABLE_ERRORS = (NavigationError, SelectorTimeoutError)


def page_retry(max_attempts: int = MAX_RETRIES, wait: wait_base | None = None):
    """Build a retry decorator for page session calls.

    Args:
        max_attempts: Total attempts, including the first call.
        wait: Backoff strategy. Defaults to exponential backoff between 2s and 30s.

    Returns:
        A tenacity ``retry`` decorator.
    """
    return retry(
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        stop=stop_after_attempt(max(1, max_attempts)),
        wait=wait or wait_exponential(multiplier=1, min=2, max=30),
        before_sleep=before_sleep_log(_tenacity_logger, logging.WARNING),
        reraise=True,
    )
