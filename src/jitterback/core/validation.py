r"""Parameter validation utilities for backoff strategies.

This module provides validation functions for backoff parameters to
ensure they meet the required constraints when a strategy is built.
"""

from __future__ import annotations

__all__ = ["validate_positive", "validate_retries_attempted"]


def validate_positive(value: int, name: str) -> int:
    """Validate that a backoff parameter is a strictly positive int.

    Args:
        value: The value to validate, in milliseconds.
        name: The parameter name, used in the error message.

    Returns:
        The validated value, unchanged.

    Raises:
        TypeError: If value is not an int (``bool`` included).
        ValueError: If value is <= 0.

    Example:
        ```pycon
        >>> from jitterback.core.validation import validate_positive
        >>> validate_positive(100, "base_delay")
        100
        >>> validate_positive(0, "base_delay")
        Traceback (most recent call last):
            ...
        ValueError: base_delay must be > 0, got 0
        >>> validate_positive(0.5, "base_delay")
        Traceback (most recent call last):
            ...
        TypeError: base_delay must be an int, got float

        ```
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if value <= 0:
        msg = f"{name} must be > 0, got {value}"
        raise ValueError(msg)
    return value


def validate_retries_attempted(retries_attempted: int) -> None:
    """Validate the number of retries already attempted.

    Args:
        retries_attempted: The number of retries already attempted
            (0 on the first retry).

    Raises:
        ValueError: If retries_attempted is negative.

    Example:
        ```pycon
        >>> from jitterback.core.validation import validate_retries_attempted
        >>> validate_retries_attempted(0)
        >>> validate_retries_attempted(-1)
        Traceback (most recent call last):
            ...
        ValueError: retries_attempted must be >= 0, got -1

        ```
    """
    if retries_attempted < 0:
        msg = f"retries_attempted must be >= 0, got {retries_attempted}"
        raise ValueError(msg)
