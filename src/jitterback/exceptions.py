r"""Failure shapes consumed by the backoff strategies.

This module provides the exception types a retry loop hands to a backoff
strategy. ``ClientError`` covers failures raised before any service
response was received, and ``ServiceError`` carries the error response
returned by the remote service, which the throttling classifier inspects.
"""

from __future__ import annotations

__all__ = ["ClientError", "ServiceError"]


class ClientError(Exception):
    """Exception raised when a request fails on the client side.

    Args:
        message: A descriptive error message.
        cause: The original exception that caused this error, if any.

    Attributes:
        message: A descriptive error message.
        cause: The original exception that caused this error, if any.

    Example:
        ```pycon
        >>> from jitterback.exceptions import ClientError
        >>> raise ClientError("Unable to execute HTTP request")
        Traceback (most recent call last):
            ...
        jitterback.exceptions.ClientError: Unable to execute HTTP request

        ```
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class ServiceError(ClientError):
    """Exception raised when the remote service returns an error response.

    Args:
        message: A descriptive error message.
        error_code: The service-specific error code (e.g. ``"Throttling"``).
        status_code: The HTTP status code of the error response.
        service_name: The name of the service that returned the error.
        request_id: The request ID assigned by the service.
        cause: The original exception that caused this error, if any.

    Example:
        ```pycon
        >>> from jitterback.exceptions import ServiceError
        >>> error = ServiceError(
        ...     "Rate exceeded",
        ...     error_code="ThrottlingException",
        ...     status_code=400,
        ...     service_name="AmazonDynamoDB",
        ... )
        >>> error.error_code
        'ThrottlingException'
        >>> print(error)
        Rate exceeded (Service: AmazonDynamoDB; Status Code: 400; Error Code: ThrottlingException; Request ID: None)

        ```
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        status_code: int | None = None,
        service_name: str | None = None,
        request_id: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.error_code = error_code
        self.status_code = status_code
        self.service_name = service_name
        self.request_id = request_id

    def __str__(self) -> str:
        return (
            f"{self.message} (Service: {self.service_name}; Status Code: {self.status_code}; "
            f"Error Code: {self.error_code}; Request ID: {self.request_id})"
        )
