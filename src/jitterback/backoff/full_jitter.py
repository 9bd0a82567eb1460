r"""Full jitter backoff strategy."""

from __future__ import annotations

__all__ = ["FullJitterBackoffStrategy"]

from typing import Any

from jitterback.backoff.jitter import BaseJitterBackoffStrategy


class FullJitterBackoffStrategy(BaseJitterBackoffStrategy):
    """Full jitter backoff strategy.

    Draws the delay uniformly from ``[0, ceiling]`` where ceiling is
    ``min(base_delay * 2 ** retries_attempted, max_backoff_time)``.

    This strategy spreads the retries of many clients as widely as
    possible and favors fast recovery: the mean delay is half the ceiling.

    Args:
        base_delay: The base delay in milliseconds. Must be > 0.
        max_backoff_time: The maximum delay in milliseconds. Must be > 0.
        rng: Optional random generator.

    Example:
        ```pycon
        >>> from jitterback.backoff import FullJitterBackoffStrategy
        >>> backoff = FullJitterBackoffStrategy(base_delay=100, max_backoff_time=20000)
        >>> 0 <= backoff.delay_before_next_retry(None, None, 3) <= 800
        True

        ```
    """

    def delay_before_next_retry(
        self,
        request: Any,  # noqa: ARG002
        exception: BaseException | None,  # noqa: ARG002
        retries_attempted: int,
    ) -> int:
        """Compute a full jitter delay.

        Args:
            request: The original request (unused).
            exception: The failure of the last attempt (unused).
            retries_attempted: The number of retries already attempted
                (0-indexed).

        Returns:
            A delay in milliseconds drawn uniformly from ``[0, ceiling]``.
        """
        return self._randint(self.ceiling(retries_attempted))
