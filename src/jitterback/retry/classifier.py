r"""Classification of failures that signal throttling.

This module decides whether a failed attempt was rejected because the
caller is being rate-limited by the remote service. The default backoff
strategy uses it to pick a backoff scheme with a guaranteed minimum wait.
"""

from __future__ import annotations

__all__ = ["THROTTLING_ERROR_CODES", "THROTTLING_STATUS_CODES", "is_throttling_error"]

import httpx

from jitterback.exceptions import ServiceError

# Service error codes returned when a request is rate-limited
THROTTLING_ERROR_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "ThrottledException",
        "RequestThrottledException",
        "TooManyRequestsException",
        "ProvisionedThroughputExceededException",
        "TransactionInProgressException",
        "RequestLimitExceeded",
        "BandwidthLimitExceeded",
        "LimitExceededException",
        "RequestThrottled",
        "SlowDown",
        "PriorRequestNotComplete",
        "EC2ThrottledException",
    }
)

# 429: Too Many Requests
THROTTLING_STATUS_CODES = (429,)


def is_throttling_error(exception: BaseException | None) -> bool:
    """Return whether a failure was caused by throttling.

    A failure is a throttling failure if it is a ``ServiceError`` whose
    error code is in ``THROTTLING_ERROR_CODES`` or whose status code is in
    ``THROTTLING_STATUS_CODES``, or an ``httpx.HTTPStatusError`` whose
    response status code is in ``THROTTLING_STATUS_CODES``. Any other
    failure, including ``None``, is not a throttling failure.

    Args:
        exception: The failure of the last attempt, if any.

    Returns:
        ``True`` if the failure signals throttling, otherwise ``False``.

    Example:
        ```pycon
        >>> from jitterback.exceptions import ServiceError
        >>> from jitterback.retry import is_throttling_error
        >>> is_throttling_error(ServiceError("Rate exceeded", error_code="Throttling"))
        True
        >>> is_throttling_error(ServiceError("Internal error", status_code=500))
        False
        >>> is_throttling_error(ValueError("not a service failure"))
        False

        ```
    """
    if isinstance(exception, ServiceError):
        return (
            exception.error_code in THROTTLING_ERROR_CODES
            or exception.status_code in THROTTLING_STATUS_CODES
        )
    if isinstance(exception, httpx.HTTPStatusError):
        return exception.response.status_code in THROTTLING_STATUS_CODES
    return False
