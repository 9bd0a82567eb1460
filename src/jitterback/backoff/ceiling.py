r"""Exponential ceiling shared by the capped backoff strategies."""

from __future__ import annotations

__all__ = ["MAX_RETRIES", "compute_ceiling"]

from jitterback.core.validation import validate_retries_attempted

# Beyond this many retries the exponential term always exceeds any
# configured maximum, so the maximum is returned without computing it
MAX_RETRIES = 30


def compute_ceiling(base_delay: int, max_backoff_time: int, retries_attempted: int) -> int:
    """Compute the capped exponential ceiling for a retry attempt.

    The ceiling is ``min(base_delay * 2 ** retries_attempted,
    max_backoff_time)``, or ``max_backoff_time`` when ``retries_attempted``
    is above ``MAX_RETRIES``.

    Args:
        base_delay: The base delay in milliseconds.
        max_backoff_time: The maximum delay in milliseconds.
        retries_attempted: The number of retries already attempted
            (0-indexed).

    Returns:
        The ceiling in milliseconds.

    Raises:
        ValueError: If retries_attempted is negative.

    Example:
        ```pycon
        >>> from jitterback.backoff.ceiling import compute_ceiling
        >>> compute_ceiling(100, 20000, 3)
        800
        >>> compute_ceiling(500, 20000, 10)
        20000
        >>> compute_ceiling(100, 20000, 40)
        20000

        ```
    """
    validate_retries_attempted(retries_attempted)
    if retries_attempted > MAX_RETRIES:
        return max_backoff_time
    return min(base_delay * (1 << retries_attempted), max_backoff_time)
