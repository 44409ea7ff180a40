# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""valkit - composable sync and async value checks with a stdout reporter.

.. code-block:: python

    from valkit import StdoutReporter, check_number_value, check_type, sync_validate

    results = sync_validate(42, [check_type("number"), check_number_value(0, 10)])
    StdoutReporter(results).report()
    # [#0][ valid ] | null
    # [#1][ invalid ] | Value should be between 0 and 10
"""

from .exceptions import ConfigurationError, ValidatorContractError, ValkitError
from .reporting import Reporter, StdoutReporter
from .validation import (
    AsyncValidator,
    SyncValidator,
    TIMEOUT_MESSAGE,
    ValidationResult,
    async_validate,
    check_async,
    check_number_value,
    check_string_length,
    check_type,
    sync_validate,
    to_number,
)

__all__ = [
    "AsyncValidator",
    "ConfigurationError",
    "Reporter",
    "StdoutReporter",
    "SyncValidator",
    "TIMEOUT_MESSAGE",
    "ValidationResult",
    "ValidatorContractError",
    "ValkitError",
    "async_validate",
    "check_async",
    "check_number_value",
    "check_string_length",
    "check_type",
    "sync_validate",
    "to_number",
]
