# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Tests for check_async – the callback-versus-deadline race.

Key scenarios tested:
1. Callback finishing before the deadline yields a valid result
2. Deadline expiring first yields "Timeout", whatever the callback does on cancel
3. Callback exceptions are converted into invalid results, never raised
4. Incoming values are coerced with Number() semantics before the call
"""

from __future__ import annotations

import logging
import math

import anyio
import pytest

from valkit import ConfigurationError, TIMEOUT_MESSAGE, ValidationResult, check_async, to_number


def _succeeds_after(seconds):
    async def callback(_value):
        await anyio.sleep(seconds)

    return callback


def _fails_with(exc):
    async def callback(_value):
        raise exc

    return callback


class TestRace:
    """Which side of the race settles first decides the result."""

    @pytest.mark.anyio
    async def test_callback_before_deadline_is_valid(self):
        result = await check_async(_succeeds_after(0.01), timeout_ms=1000)(5)

        assert result == ValidationResult(is_valid=True, message=None)

    @pytest.mark.anyio
    async def test_deadline_before_callback_reports_timeout(self):
        with anyio.fail_after(5):
            result = await check_async(_succeeds_after(1), timeout_ms=10)(5)

        assert result.is_valid is False
        assert result.message == TIMEOUT_MESSAGE == "Timeout"

    @pytest.mark.anyio
    async def test_timeout_is_logged_as_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="valkit.validation.async_check"):
            await check_async(_succeeds_after(1), timeout_ms=10)(5)

        assert any("deadline" in message for message in caplog.messages)

    @pytest.mark.anyio
    async def test_callback_is_cancelled_when_deadline_wins(self):
        events = []

        async def callback(_value):
            events.append("started")
            try:
                await anyio.sleep(1)
                events.append("finished")
            except anyio.get_cancelled_exc_class():
                events.append("cancelled")
                raise

        result = await check_async(callback, timeout_ms=10)(5)
        await anyio.sleep(0.05)

        assert result.message == "Timeout"
        assert events == ["started", "cancelled"]

    @pytest.mark.anyio
    async def test_without_timeout_waits_for_callback(self):
        result = await check_async(_succeeds_after(0.05))(5)

        assert result.is_valid is True
        assert result.message is None

    @pytest.mark.anyio
    async def test_zero_timeout_expires_before_slow_callback(self):
        result = await check_async(_succeeds_after(0.5), timeout_ms=0)(5)

        assert result.message == "Timeout"

    @pytest.mark.anyio
    async def test_fast_callback_returns_without_waiting_for_deadline(self):
        started = anyio.current_time()

        with anyio.fail_after(2):
            result = await check_async(_succeeds_after(0.01), timeout_ms=5000)(5)

        assert result.is_valid is True
        assert anyio.current_time() - started < 1


class TestUncooperativeCallbacks:
    """
    GIVEN: A callback that does not simply unwind when it is cancelled
    WHEN: The deadline expires before the callback settles
    THEN: The result is still "Timeout"; the deadline decides, not the callback
    """

    @pytest.mark.anyio
    async def test_callback_swallowing_cancellation_still_times_out(self):
        async def callback(_value):
            try:
                await anyio.sleep(1)
            except anyio.get_cancelled_exc_class():
                return

        result = await check_async(callback, timeout_ms=10)(5)

        assert result == ValidationResult.invalid("Timeout")

    @pytest.mark.anyio
    async def test_shielded_callback_still_times_out(self):
        async def callback(_value):
            with anyio.CancelScope(shield=True):
                await anyio.sleep(0.3)

        with anyio.fail_after(5):
            result = await check_async(callback, timeout_ms=10)(5)

        assert result == ValidationResult.invalid("Timeout")

    @pytest.mark.anyio
    async def test_callback_raising_during_cleanup_still_times_out(self):
        async def callback(_value):
            try:
                await anyio.sleep(1)
            except anyio.get_cancelled_exc_class():
                raise RuntimeError("connection aborted")

        result = await check_async(callback, timeout_ms=10)(5)

        assert result == ValidationResult.invalid("Timeout")


class TestCallbackFailure:
    """Callback exceptions are absorbed into the result."""

    @pytest.mark.anyio
    async def test_exception_message_becomes_result_message(self):
        result = await check_async(_fails_with(RuntimeError("boom")))(5)

        assert result == ValidationResult(is_valid=False, message="boom")

    @pytest.mark.anyio
    async def test_exception_before_deadline_wins_over_timeout(self):
        result = await check_async(_fails_with(ValueError("too big")), timeout_ms=1000)(5)

        assert result.message == "too big"

    @pytest.mark.anyio
    async def test_exception_without_text_falls_back_to_type_name(self):
        result = await check_async(_fails_with(KeyError()))(5)

        assert result.is_valid is False
        assert result.message == "KeyError"

    @pytest.mark.anyio
    async def test_callback_raising_timeout_error_keeps_its_message(self):
        result = await check_async(_fails_with(TimeoutError("upstream timed out")), timeout_ms=1000)(5)

        assert result.message == "upstream timed out"


class TestValueCoercion:
    """The callback receives the value converted with Number() semantics."""

    @pytest.mark.anyio
    @pytest.mark.parametrize(
        "value,expected",
        [(None, 0), (7, 7), (2.5, 2.5), ("42", 42.0), (True, 1)],
    )
    async def test_callback_receives_coerced_value(self, value, expected):
        seen = []

        async def callback(number):
            seen.append(number)

        await check_async(callback)(value)

        assert seen == [expected]

    @pytest.mark.anyio
    async def test_missing_value_defaults_to_zero(self):
        seen = []

        async def callback(number):
            seen.append(number)

        await check_async(callback)()

        assert seen == [0]

    @pytest.mark.anyio
    async def test_unparsable_value_is_passed_as_nan(self):
        seen = []

        async def callback(number):
            seen.append(number)

        result = await check_async(callback)("not a number")

        assert result.is_valid is True
        assert math.isnan(seen[0])


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, 0),
        (False, 0),
        (3, 3),
        (-1.5, -1.5),
        ("", 0),
        ("   ", 0),
        (" 12 ", 12.0),
        ("1e3", 1000.0),
        ("0x1A", 26),
        ("0b101", 5),
        ("0o17", 15),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_to_number_parses_like_number_constructor(value, expected):
    assert to_number(value) == expected


@pytest.mark.parametrize("value", ["abc", "1_000", "inf", "nan", "0x", "-0x1A", [1], {}, object()])
def test_to_number_returns_nan_for_unparsable_input(value):
    assert math.isnan(to_number(value))


@pytest.mark.parametrize("timeout_ms", [-1, "10", True, math.nan])
def test_invalid_timeout_is_rejected(timeout_ms):
    async def callback(_value):
        return None

    with pytest.raises(ConfigurationError):
        check_async(callback, timeout_ms=timeout_ms)


def test_non_callable_callback_is_rejected():
    with pytest.raises(ConfigurationError):
        check_async("not callable")
