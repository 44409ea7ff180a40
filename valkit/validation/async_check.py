# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Asynchronous check factory: run a user callback against an optional deadline.

The callback signals success by returning and failure by raising. Whichever
settles first, the callback or the deadline, decides the result:

- callback returns      -> valid
- callback raises       -> invalid, message describes the exception
- deadline expires      -> invalid, message ``"Timeout"``

The callback runs in a child task and the deadline only bounds the wait for
it, so the deadline wins even against a callback that ignores cancellation.
The deadline is an anyio cancel scope released on every exit path. Once the
result is decided the abandoned callback is cancelled and drained before the
check returns, so no timer or task outlives it.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Awaitable, Callable, List, Optional, Union

import anyio

from ..exceptions import ConfigurationError
from ..telemetry.metrics import record_check, record_timeout
from .base import AsyncValidator, ValidationResult
from .sync_checks import is_number

logger = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Timeout"

Number = Union[int, float]
AsyncCallback = Callable[[Number], Awaitable[None]]

_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}
_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _parse_numeric_string(text: str) -> Number:
    text = text.strip()
    if not text:
        return 0
    if text in _INFINITIES:
        return _INFINITIES[text]

    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        try:
            return int(text[2:], radix)
        except ValueError:
            return math.nan

    # float() also understands "inf", "nan" and digit separators; Number() does not.
    if "_" in text or any(word in text.lower() for word in ("inf", "nan")):
        return math.nan
    try:
        return float(text)
    except ValueError:
        return math.nan


def to_number(value: Any) -> Number:
    """Coerce *value* to a number the way JavaScript's ``Number()`` does.

    ``None`` becomes ``0``, booleans become ``0``/``1``, numbers pass
    through unchanged and strings are parsed after stripping whitespace (an
    empty string is ``0``). Anything that cannot be parsed becomes NaN.
    """

    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    if isinstance(value, str):
        return _parse_numeric_string(value)
    return math.nan


def describe_failure(exc: BaseException) -> str:
    """Human-readable description of a callback failure."""

    return str(exc) or type(exc).__name__
def check_async(callback: AsyncCallback, timeout_ms: Optional[float] = None) -> AsyncValidator:
    """Build an async predicate that runs *callback* with an optional deadline.

    Args:
        callback: ``async (number) -> None``; raises to signal failure
        timeout_ms: deadline in milliseconds, ``None`` waits indefinitely

    Raises:
        ConfigurationError: If *callback* is not callable or *timeout_ms* is
            negative, NaN or not a number.
    """

    if not callable(callback):
        raise ConfigurationError(f"check_async callback must be callable, got {callback!r}")
    if timeout_ms is not None and (
        not is_number(timeout_ms) or math.isnan(timeout_ms) or timeout_ms < 0
    ):
        raise ConfigurationError(
            f"check_async timeout_ms must be a non-negative number, got {timeout_ms!r}"
        )

    delay = None if timeout_ms is None else timeout_ms / 1000.0

    async def validator(value: Any = None) -> ValidationResult:
        numeric = to_number(value)
        started_at = time.perf_counter()
        settled = anyio.Event()
        outcome: List[Optional[Exception]] = []

        async def run_callback() -> None:
            try:
                await callback(numeric)
            except Exception as exc:
                outcome.append(exc)
            else:
                outcome.append(None)
            settled.set()

        async with anyio.create_task_group() as tg:
            tg.start_soon(run_callback)
            with anyio.move_on_after(delay):
                await settled.wait()
            timed_out = not settled.is_set()
            if timed_out:
                # The result is already decided; stop the abandoned callback.
                tg.cancel_scope.cancel()

        if timed_out:
            logger.warning("check_async callback exceeded %sms deadline", timeout_ms)
            record_timeout()
            result = ValidationResult.invalid(TIMEOUT_MESSAGE)
        elif outcome[0] is not None:
            logger.debug("check_async callback failed for %r: %r", numeric, outcome[0])
            result = ValidationResult.invalid(describe_failure(outcome[0]))
        else:
            result = ValidationResult.valid()

        record_check("async", result.is_valid, started_at)
        return result

    return validator


__all__ = [
    "AsyncCallback",
    "TIMEOUT_MESSAGE",
    "check_async",
    "describe_failure",
    "to_number",
]
