# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Runners that apply a list of validators to a single value."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

import anyio

from ..exceptions import ValidatorContractError
from ..telemetry import get_tracer, record_batch
from .base import AsyncValidator, SyncValidator, ValidationResult

logger = logging.getLogger(__name__)


def sync_validate(value: Any, validators: Sequence[SyncValidator]) -> List[ValidationResult]:
    """Apply every validator to *value* in order; results are index-aligned."""

    record_batch("sync", len(validators))
    return [validator(value) for validator in validators]


async def async_validate(value: Any, validators: Sequence[AsyncValidator]) -> List[ValidationResult]:
    """Run every async validator concurrently on *value*.

    Results come back in the order of *validators*, whatever order they
    finish in. Validators built with ``check_async`` never raise. The first
    exception raised by any other validator cancels the remaining ones and
    propagates out of this call unchanged.

    Raises:
        ValidatorContractError: If a validator resolves to something other
            than a ``ValidationResult``.
    """

    record_batch("async", len(validators))
    results: List[Optional[ValidationResult]] = [None] * len(validators)
    errors: List[Exception] = []

    with get_tracer().start_as_current_span(
        "valkit.async_validate",
        attributes={"valkit.validator_count": len(validators)},
    ):
        async with anyio.create_task_group() as tg:

            async def run(index: int, validator: AsyncValidator) -> None:
                try:
                    results[index] = await validator(value)
                except Exception as exc:
                    logger.error("Async validator #%d raised %r", index, exc)
                    errors.append(exc)
                    tg.cancel_scope.cancel()

            for index, validator in enumerate(validators):
                tg.start_soon(run, index, validator)

    if errors:
        raise errors[0]

    for index, result in enumerate(results):
        if not isinstance(result, ValidationResult):
            logger.error("Async validator #%d returned %r", index, result)
            raise ValidatorContractError(index, result)

    logger.debug(
        "async_validate ran %d validators, %d invalid",
        len(results),
        sum(1 for result in results if not result.is_valid),
    )
    return list(results)


__all__ = ["async_validate", "sync_validate"]
