r"""Unit tests for DefaultBackoffStrategy and predefined strategies."""

from __future__ import annotations

import logging
import random
from unittest.mock import Mock, patch

import httpx
import pytest

from jitterback.backoff import (
    DefaultBackoffStrategy,
    EqualJitterBackoffStrategy,
    FullJitterBackoffStrategy,
    dynamodb_default_backoff_strategy,
    sdk_default_backoff_strategy,
)
from jitterback.exceptions import ClientError, ServiceError
from jitterback.retry.classifier import is_throttling_error

############################################
#     Tests for DefaultBackoffStrategy     #
############################################


def test_default_backoff_strategy_defaults() -> None:
    """Test the zero-argument form uses the documented defaults."""
    backoff = DefaultBackoffStrategy()
    assert isinstance(backoff.full_jitter, FullJitterBackoffStrategy)
    assert isinstance(backoff.equal_jitter, EqualJitterBackoffStrategy)
    assert backoff.full_jitter.base_delay == 100
    assert backoff.equal_jitter.base_delay == 500
    assert backoff.full_jitter.max_backoff_time == 20000
    assert backoff.equal_jitter.max_backoff_time == 20000
    assert backoff.is_throttling is is_throttling_error


def test_default_backoff_strategy_custom_values() -> None:
    """Test the parameterized form."""
    backoff = DefaultBackoffStrategy(base_delay=25, throttled_base_delay=300, max_backoff_time=5000)
    assert backoff.full_jitter.base_delay == 25
    assert backoff.equal_jitter.base_delay == 300
    assert backoff.full_jitter.max_backoff_time == 5000
    assert backoff.equal_jitter.max_backoff_time == 5000


@pytest.mark.parametrize(
    ("kwargs", "message"),
    [
        ({"base_delay": 0}, r"base_delay must be > 0, got 0"),
        ({"throttled_base_delay": -1}, r"base_delay must be > 0, got -1"),
        ({"max_backoff_time": 0}, r"max_backoff_time must be > 0, got 0"),
    ],
)
def test_default_backoff_strategy_invalid_values(kwargs: dict[str, int], message: str) -> None:
    """Test that non-positive delays raise ValueError."""
    with pytest.raises(ValueError, match=message):
        DefaultBackoffStrategy(**kwargs)


def test_default_backoff_strategy_throttling_example(throttling_error: ServiceError) -> None:
    """Test a throttling failure on the sixth retry lies in [8000, 16000]."""
    backoff = DefaultBackoffStrategy()
    for _ in range(1000):
        assert 8000 <= backoff.delay_before_next_retry(None, throttling_error, 5) <= 16000


def test_default_backoff_strategy_delegates_throttling_to_equal_jitter(
    throttling_error: ServiceError,
) -> None:
    """Test throttling failures use the equal jitter strategy."""
    backoff = DefaultBackoffStrategy()
    request = httpx.Request("GET", "https://dynamodb.us-east-1.amazonaws.com")
    with (
        patch.object(
            backoff.equal_jitter, "delay_before_next_retry", return_value=1234
        ) as equal_mock,
        patch.object(backoff.full_jitter, "delay_before_next_retry") as full_mock,
    ):
        assert backoff.delay_before_next_retry(request, throttling_error, 2) == 1234
    equal_mock.assert_called_once_with(request, throttling_error, 2)
    full_mock.assert_not_called()


def test_default_backoff_strategy_delegates_other_failures_to_full_jitter(
    server_error: ServiceError,
) -> None:
    """Test non-throttling failures use the full jitter strategy."""
    backoff = DefaultBackoffStrategy()
    with (
        patch.object(backoff.equal_jitter, "delay_before_next_retry") as equal_mock,
        patch.object(
            backoff.full_jitter, "delay_before_next_retry", return_value=42
        ) as full_mock,
    ):
        assert backoff.delay_before_next_retry(None, server_error, 4) == 42
    full_mock.assert_called_once_with(None, server_error, 4)
    equal_mock.assert_not_called()


@pytest.mark.parametrize(
    "exception",
    [None, ValueError("bad value"), ClientError("Unable to execute HTTP request")],
)
def test_default_backoff_strategy_unrecognized_failure_uses_full_jitter(
    exception: BaseException | None,
) -> None:
    """Test that unrecognized failures fall back to full jitter."""
    backoff = DefaultBackoffStrategy()
    with patch.object(backoff.full_jitter, "delay_before_next_retry", return_value=7):
        assert backoff.delay_before_next_retry(None, exception, 0) == 7


def test_default_backoff_strategy_custom_classifier(server_error: ServiceError) -> None:
    """Test that a custom classifier decides the jitter scheme."""
    classifier = Mock(return_value=True)
    backoff = DefaultBackoffStrategy(
        base_delay=100, throttled_base_delay=1000, max_backoff_time=20000, is_throttling=classifier
    )
    delay = backoff.delay_before_next_retry(None, server_error, 0)
    classifier.assert_called_once_with(server_error)
    assert 500 <= delay <= 1000


def test_default_backoff_strategy_shared_rng() -> None:
    """Test that both sub-strategies draw from the provided generator."""
    rng = Mock(spec=random.Random, randint=Mock(return_value=0))
    backoff = DefaultBackoffStrategy(rng=rng, is_throttling=lambda exc: exc is not None)
    assert backoff.delay_before_next_retry(None, None, 1) == 0
    assert backoff.delay_before_next_retry(None, RuntimeError("throttled"), 1) == 500
    assert rng.randint.call_count == 2


@pytest.mark.parametrize("retries_attempted", range(201))
def test_default_backoff_strategy_never_exceeds_max_backoff_time(
    rng: random.Random, throttling_error: ServiceError, retries_attempted: int
) -> None:
    """Test that no attempt count produces a delay above the cap."""
    backoff = DefaultBackoffStrategy(rng=rng)
    for exception in (None, throttling_error):
        for _ in range(20):
            delay = backoff.delay_before_next_retry(None, exception, retries_attempted)
            assert 0 <= delay <= 20000


def test_default_backoff_strategy_logs_selection(
    caplog: pytest.LogCaptureFixture, throttling_error: ServiceError
) -> None:
    """Test that the selected scheme is logged at debug level."""
    backoff = DefaultBackoffStrategy()
    with caplog.at_level(logging.DEBUG, logger="jitterback.backoff.default"):
        backoff.delay_before_next_retry(None, throttling_error, 0)
        backoff.delay_before_next_retry(None, None, 0)
    assert "equal jitter" in caplog.text
    assert "full jitter" in caplog.text


def test_default_backoff_strategy_repr() -> None:
    """Test the string representation."""
    assert repr(DefaultBackoffStrategy(25, 500, 20000)) == (
        "DefaultBackoffStrategy(base_delay=25, throttled_base_delay=500, max_backoff_time=20000)"
    )


#################################################
#     Tests for predefined backoff strategies   #
#################################################


def test_sdk_default_backoff_strategy() -> None:
    """Test the default strategy factory."""
    backoff = sdk_default_backoff_strategy()
    assert isinstance(backoff, DefaultBackoffStrategy)
    assert backoff.full_jitter.base_delay == 100
    assert backoff.equal_jitter.base_delay == 500
    assert backoff.full_jitter.max_backoff_time == 20000


def test_sdk_default_backoff_strategy_returns_new_instance() -> None:
    """Test that each call builds a new strategy."""
    assert sdk_default_backoff_strategy() is not sdk_default_backoff_strategy()


def test_dynamodb_default_backoff_strategy() -> None:
    """Test the DynamoDB strategy factory."""
    backoff = dynamodb_default_backoff_strategy()
    assert backoff.full_jitter.base_delay == 25
    assert backoff.equal_jitter.base_delay == 500
    assert backoff.full_jitter.max_backoff_time == 20000


def test_default_backoff_strategy_shared_rng_shares_lock(rng: random.Random) -> None:
    """Test that sub-strategies drawing from one generator share its lock."""
    backoff = DefaultBackoffStrategy(rng=rng)
    assert backoff.full_jitter.lock is backoff.equal_jitter.lock


def test_default_backoff_strategy_own_generators_own_locks() -> None:
    """Test that sub-strategies with their own generators do not share a lock."""
    backoff = DefaultBackoffStrategy()
    assert backoff.full_jitter.lock is not backoff.equal_jitter.lock


@pytest.mark.parametrize("value", [0.5, 100.0, True])
@pytest.mark.parametrize("name", ["base_delay", "throttled_base_delay", "max_backoff_time"])
def test_default_backoff_strategy_non_int_delay(name: str, value: object) -> None:
    """Test that non-int delays are rejected at construction."""
    with pytest.raises(TypeError, match=r"must be an int"):
        DefaultBackoffStrategy(**{name: value})
