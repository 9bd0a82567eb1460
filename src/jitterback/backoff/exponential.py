r"""Exponential backoff strategy without jitter."""

from __future__ import annotations

__all__ = ["ExponentialBackoffStrategy"]

from typing import Any

from jitterback.backoff.base import BaseBackoffStrategy
from jitterback.backoff.ceiling import compute_ceiling
from jitterback.core.validation import validate_positive


class ExponentialBackoffStrategy(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: min(base_delay * (2 ** retries_attempted),
    max_backoff_time), without randomization.

    The result is deterministic, which is useful for reproducible tests or
    when the caller desynchronizes its retries by other means.

    Args:
        base_delay: The base delay in milliseconds. Must be > 0.
        max_backoff_time: The maximum delay in milliseconds. Must be > 0.

    Raises:
        TypeError: If base_delay or max_backoff_time is not an int.
        ValueError: If base_delay or max_backoff_time is not > 0.

    Example:
        ```pycon
        >>> from jitterback.backoff import ExponentialBackoffStrategy
        >>> backoff = ExponentialBackoffStrategy(base_delay=100, max_backoff_time=20000)
        >>> backoff.delay_before_next_retry(None, None, 0)  # First retry
        100
        >>> backoff.delay_before_next_retry(None, None, 3)  # Fourth retry
        800
        >>> backoff.delay_before_next_retry(None, None, 40)  # Would be huge, but capped
        20000

        ```
    """

    def __init__(self, base_delay: int, max_backoff_time: int) -> None:
        self._base_delay = validate_positive(base_delay, "base_delay")
        self._max_backoff_time = validate_positive(max_backoff_time, "max_backoff_time")

    @property
    def base_delay(self) -> int:
        """The base delay in milliseconds."""
        return self._base_delay

    @property
    def max_backoff_time(self) -> int:
        """The maximum delay in milliseconds."""
        return self._max_backoff_time

    def delay_before_next_retry(
        self,
        request: Any,  # noqa: ARG002
        exception: BaseException | None,  # noqa: ARG002
        retries_attempted: int,
    ) -> int:
        """Calculate exponential backoff delay.

        Args:
            request: The original request (unused).
            exception: The failure of the last attempt (unused).
            retries_attempted: The number of retries already attempted
                (0-indexed).

        Returns:
            The calculated delay in milliseconds, capped at max_backoff_time.
        """
        return compute_ceiling(self._base_delay, self._max_backoff_time, retries_attempted)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_delay={self._base_delay}, "
            f"max_backoff_time={self._max_backoff_time})"
        )
