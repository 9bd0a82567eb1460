r"""Backoff strategies for retry delays.

This package provides the backoff strategies used to compute how many
milliseconds to wait before retrying a failed request: full jitter, equal
jitter, plain exponential, and a default strategy that picks a jitter
scheme depending on whether the failure was caused by throttling.
"""

from __future__ import annotations

__all__ = [
    "MAX_RETRIES",
    "BaseBackoffStrategy",
    "BaseJitterBackoffStrategy",
    "DefaultBackoffStrategy",
    "EqualJitterBackoffStrategy",
    "ExponentialBackoffStrategy",
    "FullJitterBackoffStrategy",
    "compute_ceiling",
    "dynamodb_default_backoff_strategy",
    "sdk_default_backoff_strategy",
]

from jitterback.backoff.base import BaseBackoffStrategy
from jitterback.backoff.ceiling import MAX_RETRIES, compute_ceiling
from jitterback.backoff.default import (
    DefaultBackoffStrategy,
    dynamodb_default_backoff_strategy,
    sdk_default_backoff_strategy,
)
from jitterback.backoff.equal_jitter import EqualJitterBackoffStrategy
from jitterback.backoff.exponential import ExponentialBackoffStrategy
from jitterback.backoff.full_jitter import FullJitterBackoffStrategy
from jitterback.backoff.jitter import BaseJitterBackoffStrategy
