r"""Core shared logic for backoff strategies.

This module contains the default configuration values and the
parameter validation shared by every backoff strategy.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_BASE_DELAY",
    "DEFAULT_MAX_BACKOFF_TIME",
    "DEFAULT_THROTTLED_BASE_DELAY",
    "DYNAMODB_DEFAULT_BASE_DELAY",
    "BackoffConfig",
    "validate_positive",
    "validate_retries_attempted",
]

from jitterback.core.config import (
    DEFAULT_BASE_DELAY,
    DEFAULT_MAX_BACKOFF_TIME,
    DEFAULT_THROTTLED_BASE_DELAY,
    DYNAMODB_DEFAULT_BASE_DELAY,
    BackoffConfig,
)
from jitterback.core.validation import validate_positive, validate_retries_attempted
