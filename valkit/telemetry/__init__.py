"""Telemetry package - OpenTelemetry instruments for check outcomes."""

from .metrics import (
    async_check_latency_ms,
    async_check_timeout_total,
    check_total,
    record_batch,
    record_check,
    record_timeout,
    validate_batch_size,
)
from .runtime import get_tracer, meter

__all__ = [
    "async_check_latency_ms",
    "async_check_timeout_total",
    "check_total",
    "get_tracer",
    "meter",
    "record_batch",
    "record_check",
    "record_timeout",
    "validate_batch_size",
]
