# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for valkit."""

from __future__ import annotations

import time
from typing import Optional

from .runtime import meter

check_total = meter.create_counter(
    name="valkit.check.total",
    description="Counts check invocations partitioned by check name and outcome.",
    unit="1",
)

async_check_timeout_total = meter.create_counter(
    name="valkit.async_check.timeout.total",
    description="Counts asynchronous checks that hit their deadline before the callback finished.",
    unit="1",
)

async_check_latency_ms = meter.create_histogram(
    name="valkit.async_check.latency.ms",
    description="Time spent waiting on the callback of an asynchronous check.",
    unit="ms",
)

validate_batch_size = meter.create_histogram(
    name="valkit.validate.batch.size",
    description="Number of validators applied by a single runner call.",
    unit="1",
)


def record_check(check: str, is_valid: bool, started_at: Optional[float] = None) -> None:
    """Record the outcome of a single check invocation.

    Args:
        check: Name of the check factory ("type", "number_value", ...)
        is_valid: Outcome of the check
        started_at: ``time.perf_counter()`` value taken before an async check
            awaited its callback; when given the latency histogram is updated
    """
    outcome = "valid" if is_valid else "invalid"
    try:
        check_total.add(1, {"check": check, "outcome": outcome})
        if started_at is not None:
            duration_ms = (time.perf_counter() - started_at) * 1000.0
            async_check_latency_ms.record(duration_ms, {"check": check, "outcome": outcome})
    except Exception:
        # Telemetry must never interfere with validation
        pass


def record_timeout() -> None:
    """Count an asynchronous check whose deadline expired first."""
    try:
        async_check_timeout_total.add(1)
    except Exception:
        pass


def record_batch(mode: str, size: int) -> None:
    """Record how many validators a runner applied."""
    try:
        validate_batch_size.record(size, {"mode": mode})
    except Exception:
        pass


__all__ = [
    "check_total",
    "async_check_timeout_total",
    "async_check_latency_ms",
    "validate_batch_size",
    "record_check",
    "record_batch",
    "record_timeout",
]
