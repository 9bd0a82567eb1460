from __future__ import annotations

import random
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from jitterback.exceptions import ServiceError

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def rng() -> random.Random:
    """Create a seeded random generator for reproducible jitter."""
    return random.Random(42)  # noqa: S311


@pytest.fixture
def throttling_error() -> ServiceError:
    """Create a service error classified as throttling."""
    return ServiceError(
        "Rate exceeded",
        error_code="ThrottlingException",
        status_code=400,
        service_name="AmazonDynamoDB",
        request_id="req-123",
    )


@pytest.fixture
def server_error() -> ServiceError:
    """Create a service error not classified as throttling."""
    return ServiceError(
        "We encountered an internal error. Please try again.",
        error_code="InternalError",
        status_code=500,
        service_name="AmazonS3",
    )
