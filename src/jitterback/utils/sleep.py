r"""Sleep helpers for retry loops.

This module turns the millisecond delay computed by a backoff strategy
into a sleep, either blocking with ``time.sleep`` or awaitable with
``asyncio.sleep``. Cancelling the sleep is the caller's responsibility.
"""

from __future__ import annotations

__all__ = ["async_sleep_before_retry", "calculate_sleep_time", "sleep_before_retry"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from jitterback.backoff.base import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


def calculate_sleep_time(
    backoff_strategy: BaseBackoffStrategy,
    request: Any,
    exception: BaseException | None,
    retries_attempted: int,
) -> float:
    """Calculate the sleep time in seconds before the next retry.

    Args:
        backoff_strategy: The backoff strategy computing the delay.
        request: The original request.
        exception: The failure of the last attempt, if any.
        retries_attempted: The number of retries already attempted
            (0-indexed).

    Returns:
        The sleep time in seconds.

    Example:
        ```pycon
        >>> from jitterback.backoff import ExponentialBackoffStrategy
        >>> from jitterback.utils.sleep import calculate_sleep_time
        >>> backoff = ExponentialBackoffStrategy(base_delay=100, max_backoff_time=20000)
        >>> calculate_sleep_time(backoff, None, None, 0)
        0.1
        >>> calculate_sleep_time(backoff, None, None, 2)
        0.4

        ```
    """
    delay = backoff_strategy.delay_before_next_retry(request, exception, retries_attempted)
    sleep_time = delay / 1000
    logger.debug(f"Waiting {sleep_time:.3f}s before retry {retries_attempted + 1}")
    return sleep_time


def sleep_before_retry(
    backoff_strategy: BaseBackoffStrategy,
    request: Any,
    exception: BaseException | None,
    retries_attempted: int,
) -> float:
    """Block the current thread for the delay before the next retry.

    Args:
        backoff_strategy: The backoff strategy computing the delay.
        request: The original request.
        exception: The failure of the last attempt, if any.
        retries_attempted: The number of retries already attempted
            (0-indexed).

    Returns:
        The time slept in seconds.
    """
    sleep_time = calculate_sleep_time(backoff_strategy, request, exception, retries_attempted)
    time.sleep(sleep_time)
    return sleep_time


async def async_sleep_before_retry(
    backoff_strategy: BaseBackoffStrategy,
    request: Any,
    exception: BaseException | None,
    retries_attempted: int,
) -> float:
    """Suspend the current task for the delay before the next retry.

    Args:
        backoff_strategy: The backoff strategy computing the delay.
        request: The original request.
        exception: The failure of the last attempt, if any.
        retries_attempted: The number of retries already attempted
            (0-indexed).

    Returns:
        The time slept in seconds.
    """
    sleep_time = calculate_sleep_time(backoff_strategy, request, exception, retries_attempted)
    await asyncio.sleep(sleep_time)
    return sleep_time
