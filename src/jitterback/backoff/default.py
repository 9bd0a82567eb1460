r"""Default backoff strategy and predefined strategy factories.

The default strategy uses full jitter for generic failures, which gives
quick recovery and a wide retry distribution, and equal jitter for
throttling failures, which guarantees a minimum wait before retrying.
"""

from __future__ import annotations

__all__ = [
    "DefaultBackoffStrategy",
    "dynamodb_default_backoff_strategy",
    "sdk_default_backoff_strategy",
]

import logging
import threading
from typing import TYPE_CHECKING, Any

from jitterback.backoff.base import BaseBackoffStrategy
from jitterback.backoff.equal_jitter import EqualJitterBackoffStrategy
from jitterback.backoff.full_jitter import FullJitterBackoffStrategy
from jitterback.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_BACKOFF_TIME,
    DEFAULT_THROTTLED_BASE_DELAY,
    DYNAMODB_DEFAULT_BASE_DELAY,
)
from jitterback.retry.classifier import is_throttling_error

if TYPE_CHECKING:
    import random
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class DefaultBackoffStrategy(BaseBackoffStrategy):
    """Backoff strategy that picks a jitter scheme per failure.

    Throttling failures are delegated to an equal jitter strategy built
    with ``throttled_base_delay``, every other failure to a full jitter
    strategy built with ``base_delay``. Both share ``max_backoff_time``.
    Failures the classifier does not recognize take the full jitter path.

    Args:
        base_delay: Base delay in milliseconds for non-throttled failures
            (default: 100). Must be > 0.
        throttled_base_delay: Base delay in milliseconds for throttled
            failures (default: 500). Must be > 0.
        max_backoff_time: Maximum delay in milliseconds (default: 20000).
            Must be > 0.
        is_throttling: Optional predicate telling whether a failure is a
            throttling failure. Defaults to ``is_throttling_error``.
        rng: Optional random generator shared by both sub-strategies.

    Raises:
        TypeError: If any delay is not an int.
        ValueError: If any delay is not > 0.

    Example:
        ```pycon
        >>> from jitterback.backoff import DefaultBackoffStrategy
        >>> from jitterback.exceptions import ServiceError
        >>> backoff = DefaultBackoffStrategy()
        >>> error = ServiceError("Rate exceeded", error_code="Throttling")
        >>> 8000 <= backoff.delay_before_next_retry(None, error, 5) <= 16000
        True

        ```
    """

    def __init__(
        self,
        base_delay: int = DEFAULT_BASE_DELAY,
        throttled_base_delay: int = DEFAULT_THROTTLED_BASE_DELAY,
        max_backoff_time: int = DEFAULT_MAX_BACKOFF_TIME,
        is_throttling: Callable[[BaseException | None], bool] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        # Sub-strategies sharing an injected generator must share its lock
        lock = threading.Lock() if rng is not None else None
        self.full_jitter = FullJitterBackoffStrategy(
            base_delay, max_backoff_time, rng=rng, lock=lock
        )
        self.equal_jitter = EqualJitterBackoffStrategy(
            throttled_base_delay, max_backoff_time, rng=rng, lock=lock
        )
        self.is_throttling = is_throttling if is_throttling is not None else is_throttling_error

    def delay_before_next_retry(
        self,
        request: Any,
        exception: BaseException | None,
        retries_attempted: int,
    ) -> int:
        """Compute the delay with the scheme matching the failure.

        Args:
            request: The original request, forwarded to the sub-strategy.
            exception: The failure of the last attempt, if any.
            retries_attempted: The number of retries already attempted
                (0-indexed).

        Returns:
            The delay in milliseconds before the next retry.
        """
        if self.is_throttling(exception):
            delay = self.equal_jitter.delay_before_next_retry(
                request, exception, retries_attempted
            )
            logger.debug(
                f"Throttling failure {type(exception).__name__} on retry {retries_attempted}, "
                f"equal jitter delay: {delay}ms"
            )
            return delay
        delay = self.full_jitter.delay_before_next_retry(request, exception, retries_attempted)
        logger.debug(f"Retry {retries_attempted}, full jitter delay: {delay}ms")
        return delay

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_delay={self.full_jitter.base_delay}, "
            f"throttled_base_delay={self.equal_jitter.base_delay}, "
            f"max_backoff_time={self.full_jitter.max_backoff_time})"
        )


def sdk_default_backoff_strategy() -> DefaultBackoffStrategy:
    """Return the default backoff strategy of a client.

    Returns:
        A DefaultBackoffStrategy with base delays of 100ms (non-throttled)
        and 500ms (throttled), capped at 20000ms.

    Example:
        ```pycon
        >>> from jitterback.backoff import sdk_default_backoff_strategy
        >>> sdk_default_backoff_strategy()
        DefaultBackoffStrategy(base_delay=100, throttled_base_delay=500, max_backoff_time=20000)

        ```
    """
    return DefaultBackoffStrategy()


def dynamodb_default_backoff_strategy() -> DefaultBackoffStrategy:
    """Return the default backoff strategy of a DynamoDB client.

    Returns:
        A DefaultBackoffStrategy with base delays of 25ms (non-throttled)
        and 500ms (throttled), capped at 20000ms.

    Example:
        ```pycon
        >>> from jitterback.backoff import dynamodb_default_backoff_strategy
        >>> dynamodb_default_backoff_strategy()
        DefaultBackoffStrategy(base_delay=25, throttled_base_delay=500, max_backoff_time=20000)

        ```
    """
    return DefaultBackoffStrategy(base_delay=DYNAMODB_DEFAULT_BASE_DELAY)
