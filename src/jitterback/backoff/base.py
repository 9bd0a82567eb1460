r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod
from typing import Any


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how many milliseconds to wait before
    retrying a failed request, based on the failure and on the number of
    retries already attempted. Strategies only compute the delay, the
    caller performs the wait.
    """

    @abstractmethod
    def delay_before_next_retry(
        self,
        request: Any,
        exception: BaseException | None,
        retries_attempted: int,
    ) -> int:
        """Compute the delay before the next retry attempt.

        Args:
            request: The original request. Opaque to the predefined
                strategies.
            exception: The failure of the last attempt, if any.
            retries_attempted: The number of retries already attempted
                (0-indexed). For example, retries_attempted=0 is the
                first retry, retries_attempted=1 is the second retry, etc.

        Returns:
            The non-negative delay in milliseconds before the next retry.
        """
