r"""jitterback - Jitter-based backoff strategies for HTTP client retries.

This package computes how long an HTTP client's retry loop should wait
before resending a failed request. Strategies are configured once,
shared across concurrent requests, and return a delay in milliseconds.

Key Features:
    - Full jitter, equal jitter and plain exponential backoff
    - A default strategy using equal jitter for throttling failures and
      full jitter for everything else
    - Exponential ceiling capped at a maximum, safe for any attempt count
    - Random source safe to share between threads
    - Sync and async sleep helpers

Example:
    ```pycon
    >>> from jitterback import DefaultBackoffStrategy, ServiceError
    >>> backoff = DefaultBackoffStrategy()
    >>> delay = backoff.delay_before_next_retry(None, ServiceError("Rate exceeded", status_code=429), 0)
    >>> 250 <= delay <= 500
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "BackoffConfig",
    "BaseBackoffStrategy",
    "ClientError",
    "DefaultBackoffStrategy",
    "EqualJitterBackoffStrategy",
    "ExponentialBackoffStrategy",
    "FullJitterBackoffStrategy",
    "ServiceError",
    "__version__",
    "async_sleep_before_retry",
    "is_throttling_error",
    "sleep_before_retry",
]

from importlib.metadata import PackageNotFoundError, version

from jitterback.backoff import (
    BaseBackoffStrategy,
    DefaultBackoffStrategy,
    EqualJitterBackoffStrategy,
    ExponentialBackoffStrategy,
    FullJitterBackoffStrategy,
)
from jitterback.core.config import BackoffConfig
from jitterback.exceptions import ClientError, ServiceError
from jitterback.retry.classifier import is_throttling_error
from jitterback.utils.sleep import async_sleep_before_retry, sleep_before_retry

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
