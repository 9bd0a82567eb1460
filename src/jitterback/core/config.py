r"""Configuration dataclass and defaults for backoff strategies.

This module provides the default delay constants and a dataclass-based
configuration object used to build the default backoff strategy of a
client.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_BACKOFF_TIME",
    "DEFAULT_THROTTLED_BASE_DELAY",
    "DYNAMODB_DEFAULT_BASE_DELAY",
    "BackoffConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from jitterback.core.validation import validate_positive

if TYPE_CHECKING:
    import random
    from collections.abc import Callable

    from jitterback.backoff.default import DefaultBackoffStrategy


# Default base sleep time in milliseconds for non-throttled failures
DEFAULT_BASE_DELAY = 100

# Default base sleep time in milliseconds for throttled failures
DEFAULT_THROTTLED_BASE_DELAY = 500

# Default maximum back-off time in milliseconds before retrying a request
DEFAULT_MAX_BACKOFF_TIME = 20 * 1000

# Default base sleep time in milliseconds for DynamoDB
DYNAMODB_DEFAULT_BASE_DELAY = 25


@dataclass(frozen=True)
class BackoffConfig:
    """Configuration for the default backoff strategy of a client.

    All delays are expressed in milliseconds and must be > 0.

    Args:
        base_delay: Base delay for non-throttled failures.
        throttled_base_delay: Base delay for throttled failures.
        max_backoff_time: Upper bound of any computed delay.

    Example:
        ```pycon
        >>> from jitterback.core.config import BackoffConfig
        >>> config = BackoffConfig()
        >>> config.max_backoff_time
        20000
        >>> merged = config.merge(base_delay=25)
        >>> merged.base_delay
        25
        >>> config.base_delay  # Original unchanged
        100

        ```
    """

    base_delay: int = DEFAULT_BASE_DELAY
    throttled_base_delay: int = DEFAULT_THROTTLED_BASE_DELAY
    max_backoff_time: int = DEFAULT_MAX_BACKOFF_TIME

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            TypeError: If any delay is not an int.
        ValueError: If any delay is not strictly positive.
        """
        validate_positive(self.base_delay, "base_delay")
        validate_positive(self.throttled_base_delay, "throttled_base_delay")
        validate_positive(self.max_backoff_time, "max_backoff_time")

    def merge(self, **overrides: Any) -> BackoffConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new BackoffConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the backoff configuration parameters.
        """
        return {
            "base_delay": self.base_delay,
            "throttled_base_delay": self.throttled_base_delay,
            "max_backoff_time": self.max_backoff_time,
        }

    def build_strategy(
        self,
        is_throttling: Callable[[BaseException | None], bool] | None = None,
        rng: random.Random | None = None,
    ) -> DefaultBackoffStrategy:
        """Build a default backoff strategy from this configuration.

        Args:
            is_throttling: Optional throttling classifier. Defaults to
                ``is_throttling_error``.
            rng: Optional random generator shared by the jittered
                sub-strategies.

        Returns:
            A DefaultBackoffStrategy configured with these delays.

        Example:
            ```pycon
            >>> from jitterback.core.config import BackoffConfig
            >>> strategy = BackoffConfig(base_delay=25).build_strategy()
            >>> strategy.full_jitter.base_delay
            25

            ```
        """
        from jitterback.backoff.default import DefaultBackoffStrategy  # noqa: PLC0415

        return DefaultBackoffStrategy(
            **self.to_dict(),
            is_throttling=is_throttling,
            rng=rng,
        )
