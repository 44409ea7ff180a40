"""Validation package - result type, check factories and runners.

Checks are pure predicates: they report problems through
``ValidationResult`` and never raise for a bad value.
"""

from .async_check import TIMEOUT_MESSAGE, check_async, to_number
from .base import AsyncValidator, SyncValidator, ValidationResult
from .runners import async_validate, sync_validate
from .sync_checks import check_number_value, check_string_length, check_type

__all__ = [
    "AsyncValidator",
    "SyncValidator",
    "TIMEOUT_MESSAGE",
    "ValidationResult",
    "async_validate",
    "check_async",
    "check_number_value",
    "check_string_length",
    "check_type",
    "sync_validate",
    "to_number",
]
