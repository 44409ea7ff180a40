# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Synchronous check factories.

Each factory takes its configuration and returns a predicate that maps any
value to a ``ValidationResult``. Predicates never raise for bad values; a
mismatch is reported as an invalid result with a human-readable message.

    >>> is_port = check_number_value(1, 65535)
    >>> is_port(8080).is_valid
    True
    >>> is_port("8080").message
    'Value is not a number'
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Final

from ..exceptions import ConfigurationError
from ..telemetry.metrics import record_check
from .base import SyncValidator, ValidationResult

logger = logging.getLogger(__name__)


def is_number(value: Any) -> bool:
    """Return True for ints and floats. ``bool`` is deliberately excluded."""

    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


_TYPE_PREDICATES: Final[Dict[str, Callable[[Any], bool]]] = {
    "string": is_string,
    "number": is_number,
}


def check_type(target_type: str) -> SyncValidator:
    """Build a predicate that accepts values of *target_type* ("string" or "number")."""

    try:
        matches = _TYPE_PREDICATES[target_type]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unsupported target type {target_type!r}; expected one of {sorted(_TYPE_PREDICATES)}"
        ) from None

    failure = f"Value is not a {target_type}"

    def validator(value: Any) -> ValidationResult:
        if matches(value):
            result = ValidationResult.valid()
        else:
            result = ValidationResult.invalid(failure)
        logger.debug("check_type(%s) on %r -> %s", target_type, value, result.is_valid)
        record_check("type", result.is_valid)
        return result

    return validator


def check_number_value(min_value: float, max_value: float) -> SyncValidator:
    """Build a predicate accepting numbers within ``[min_value, max_value]``.

    Both bounds are inclusive. When ``min_value > max_value`` the range is
    empty and every number is rejected. NaN never falls inside a range.
    """

    if not is_number(min_value) or not is_number(max_value):
        raise ConfigurationError(
            f"Range bounds must be numbers, got min={min_value!r} max={max_value!r}"
        )

    failure = f"Value should be between {min_value} and {max_value}"

    def validator(value: Any) -> ValidationResult:
        if not is_number(value):
            result = ValidationResult.invalid("Value is not a number")
        elif min_value <= value <= max_value:
            result = ValidationResult.valid()
        else:
            result = ValidationResult.invalid(failure)
        logger.debug(
            "check_number_value(%s, %s) on %r -> %s", min_value, max_value, value, result.is_valid
        )
        record_check("number_value", result.is_valid)
        return result

    return validator


def check_string_length(min_length: int, max_length: int) -> SyncValidator:
    """Build a predicate accepting strings whose length is within ``[min_length, max_length]``.

    Length is ``len(value)``, i.e. the number of Unicode code points. No
    normalization is applied, so a precomposed "é" counts as 1 and
    "e" + combining accent counts as 2.
    """

    if not is_number(min_length) or not is_number(max_length):
        raise ConfigurationError(
            f"Length bounds must be numbers, got min={min_length!r} max={max_length!r}"
        )

    failure = f"Length should be between {min_length} and {max_length}"

    def validator(value: Any) -> ValidationResult:
        if not is_string(value):
            result = ValidationResult.invalid("Value is not a string")
        elif min_length <= len(value) <= max_length:
            result = ValidationResult.valid()
        else:
            result = ValidationResult.invalid(failure)
        logger.debug(
            "check_string_length(%s, %s) on %r -> %s", min_length, max_length, value, result.is_valid
        )
        record_check("string_length", result.is_valid)
        return result

    return validator


__all__ = [
    "check_number_value",
    "check_string_length",
    "check_type",
    "is_number",
    "is_string",
]
