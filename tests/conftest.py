"""Pytest fixtures for the valkit test-suite.

Async tests are marked ``@pytest.mark.anyio`` and run through anyio's
bundled pytest plugin.
"""
from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"
