# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Core result type and validator signatures shared by every check."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of applying one validator to one value.

    ``message`` is ``None`` exactly when ``is_valid`` is true. An empty
    string counts as a message, so ``ValidationResult(False, "")`` is
    accepted while ``ValidationResult(True, "")`` is not.
    """

    is_valid: bool
    message: Optional[str] = None

    def __post_init__(self):
        if self.is_valid and self.message is not None:
            raise ValueError("A valid ValidationResult must not carry a message")
        if not self.is_valid and self.message is None:
            raise ValueError("An invalid ValidationResult requires a message")

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, message=message)


SyncValidator = Callable[[Any], ValidationResult]
AsyncValidator = Callable[[Any], Awaitable[ValidationResult]]


__all__ = ["AsyncValidator", "SyncValidator", "ValidationResult"]
