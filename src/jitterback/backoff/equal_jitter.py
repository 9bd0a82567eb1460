r"""Equal jitter backoff strategy."""

from __future__ import annotations

__all__ = ["EqualJitterBackoffStrategy"]

from typing import Any

from jitterback.backoff.jitter import BaseJitterBackoffStrategy


class EqualJitterBackoffStrategy(BaseJitterBackoffStrategy):
    """Equal jitter backoff strategy.

    Keeps half of the ceiling as a guaranteed wait and randomizes the
    other half: ``ceiling // 2 + randint(0, ceiling // 2)``.

    This strategy suits throttling failures, where the service asked the
    client to slow down and an immediate retry is pointless.

    Args:
        base_delay: The base delay in milliseconds. Must be > 0.
        max_backoff_time: The maximum delay in milliseconds. Must be > 0.
        rng: Optional random generator.

    Example:
        ```pycon
        >>> from jitterback.backoff import EqualJitterBackoffStrategy
        >>> backoff = EqualJitterBackoffStrategy(base_delay=500, max_backoff_time=20000)
        >>> 10000 <= backoff.delay_before_next_retry(None, None, 10) <= 20000
        True

        ```
    """

    def delay_before_next_retry(
        self,
        request: Any,  # noqa: ARG002
        exception: BaseException | None,  # noqa: ARG002
        retries_attempted: int,
    ) -> int:
        """Compute an equal jitter delay.

        Args:
            request: The original request (unused).
            exception: The failure of the last attempt (unused).
            retries_attempted: The number of retries already attempted
                (0-indexed).

        Returns:
            A delay in milliseconds in ``[ceiling // 2, ceiling]``.
        """
        half = self.ceiling(retries_attempted) // 2
        return half + self._randint(half)
