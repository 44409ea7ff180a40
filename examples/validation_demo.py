# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Validation Demo: sync checks, an async check with a deadline, and a report.

Run with:
    python examples/validation_demo.py
"""

import anyio

from valkit import (
    StdoutReporter,
    async_validate,
    check_async,
    check_number_value,
    check_string_length,
    check_type,
    sync_validate,
)


def demo_sync_checks():
    """Apply three sync checks to a username."""
    print("\n" + "=" * 70)
    print("DEMO 1: Synchronous checks")
    print("=" * 70)

    for username in ("alice", "al", 42):
        print(f"\n  Checking {username!r}:")
        results = sync_validate(
            username,
            [check_type("string"), check_string_length(3, 16)],
        )
        StdoutReporter(results).report()

    print("\n  Checking a port number:")
    StdoutReporter(sync_validate(70000, [check_number_value(1, 65535)])).report()


async def demo_async_checks():
    """Race two lookups against their deadlines."""
    print("\n" + "=" * 70)
    print("DEMO 2: Asynchronous checks with deadlines")
    print("=" * 70)

    async def quota_lookup(value):
        await anyio.sleep(0.01)
        if value > 100:
            raise ValueError(f"Quota exceeded: {value} > 100")

    async def slow_lookup(_value):
        await anyio.sleep(2)

    results = await async_validate(
        250,
        [
            check_async(quota_lookup, timeout_ms=500),
            check_async(slow_lookup, timeout_ms=50),
        ],
    )
    reporter = StdoutReporter(results)
    reporter.report()
    print(f"\n  All valid: {reporter.is_valid()}  ({len(reporter.pick_invalid())} invalid)")


if __name__ == "__main__":
    demo_sync_checks()
    anyio.run(demo_async_checks)
