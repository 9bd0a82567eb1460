r"""Shared state of the jittered backoff strategies.

This module provides the base class of the full jitter and equal jitter
strategies. It owns the configured delays and a random source that can be
used concurrently from several threads.
"""

from __future__ import annotations

__all__ = ["BaseJitterBackoffStrategy"]

import random
import threading

from jitterback.backoff.base import BaseBackoffStrategy
from jitterback.backoff.ceiling import compute_ceiling
from jitterback.core.validation import validate_positive


class BaseJitterBackoffStrategy(BaseBackoffStrategy):
    """Base class for backoff strategies that randomize the ceiling.

    Instances are meant to be created once per client and shared across
    concurrent retry loops. Draws from the random source are serialized
    with a lock, the configured delays are read-only.

    Args:
        base_delay: The base delay in milliseconds. Must be > 0.
        max_backoff_time: The maximum delay in milliseconds. Must be > 0.
        rng: Optional random generator. A new ``random.Random`` is
            created if not provided.
        lock: Optional lock guarding draws from ``rng``. Strategies sharing
            one generator must share its lock.

    Raises:
        TypeError: If base_delay or max_backoff_time is not an int.
        ValueError: If base_delay or max_backoff_time is not > 0.
    """

    def __init__(
        self,
        base_delay: int,
        max_backoff_time: int,
        rng: random.Random | None = None,
        lock: threading.Lock | None = None,
    ) -> None:
        self._base_delay = validate_positive(base_delay, "base_delay")
        self._max_backoff_time = validate_positive(max_backoff_time, "max_backoff_time")
        self._random = rng if rng is not None else random.Random()  # noqa: S311
        self._lock = lock if lock is not None else threading.Lock()

    @property
    def base_delay(self) -> int:
        """The base delay in milliseconds."""
        return self._base_delay

    @property
    def max_backoff_time(self) -> int:
        """The maximum delay in milliseconds."""
        return self._max_backoff_time

    @property
    def lock(self) -> threading.Lock:
        """The lock guarding draws from the random generator."""
        return self._lock

    def ceiling(self, retries_attempted: int) -> int:
        """Compute the exponential ceiling for a retry attempt.

        Args:
            retries_attempted: The number of retries already attempted
                (0-indexed).

        Returns:
            The ceiling in milliseconds.
        """
        return compute_ceiling(self._base_delay, self._max_backoff_time, retries_attempted)

    def _randint(self, upper: int) -> int:
        """Draw a random integer in ``[0, upper]``, both bounds included."""
        with self._lock:
            return self._random.randint(0, upper)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_delay={self._base_delay}, "
            f"max_backoff_time={self._max_backoff_time})"
        )
