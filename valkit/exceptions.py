# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for the valkit toolkit.

Checks never raise for a bad *value*; they report it through
``ValidationResult``. These exceptions cover the two remaining cases:
invalid factory arguments and validators that break the runner contract.
"""

from __future__ import annotations

from typing import Optional


class ValkitError(Exception):
    """Base class for every error raised by valkit."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ValkitError):
    """Raised when a check factory receives arguments it cannot honour."""


class ValidatorContractError(ValkitError):
    """Raised when a validator handed to a runner does not return a ValidationResult."""

    def __init__(self, index: int, returned: object, reason: Optional[str] = None):
        self.index = index
        self.returned = returned
        if reason is None:
            reason = (
                f"Validator #{index} returned {type(returned).__name__!s} "
                "instead of a ValidationResult"
            )
        super().__init__(reason)


__all__ = [
    "ValkitError",
    "ConfigurationError",
    "ValidatorContractError",
]
