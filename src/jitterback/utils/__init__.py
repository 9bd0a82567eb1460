r"""Utility functions for retry loops using backoff strategies."""

from __future__ import annotations

__all__ = ["async_sleep_before_retry", "calculate_sleep_time", "sleep_before_retry"]

from jitterback.utils.sleep import (
    async_sleep_before_retry,
    calculate_sleep_time,
    sleep_before_retry,
)
