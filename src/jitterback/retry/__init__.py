r"""Retry collaborators consumed by the backoff strategies."""

from __future__ import annotations

__all__ = ["THROTTLING_ERROR_CODES", "THROTTLING_STATUS_CODES", "is_throttling_error"]

from jitterback.retry.classifier import (
    THROTTLING_ERROR_CODES,
    THROTTLING_STATUS_CODES,
    is_throttling_error,
)
