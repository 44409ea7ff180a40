# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Reporter that prints a batch of validation results to standard output.

Each result becomes one line::

    [#0][ valid ] | null
    [#1][ invalid ] | Value is not a number

The line format is consumed by external tooling and must stay stable; an
absent message is rendered as the literal ``null``.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

from ..validation.base import ValidationResult

logger = logging.getLogger(__name__)

ABSENT_MESSAGE = "null"


def format_result(index: int, result: ValidationResult) -> str:
    status = "valid" if result.is_valid else "invalid"
    message = ABSENT_MESSAGE if result.message is None else result.message
    return f"[#{index}][ {status} ] | {message}"


class StdoutReporter:
    """Summarize a fixed batch of ValidationResult objects.

    The batch is copied into a tuple at construction, so every query below
    is a pure read and repeated calls return identical answers.
    """

    def __init__(self, results: Iterable[ValidationResult]):
        self._results: Tuple[ValidationResult, ...] = tuple(results)

    @property
    def results(self) -> Tuple[ValidationResult, ...]:
        return self._results

    def is_valid(self) -> bool:
        """True when every result is valid (an empty batch is valid)."""
        return all(result.is_valid for result in self._results)

    def pick_invalid(self) -> List[ValidationResult]:
        return [result for result in self._results if not result.is_valid]

    def pick_valid(self) -> List[ValidationResult]:
        return [result for result in self._results if result.is_valid]

    def format_lines(self) -> List[str]:
        """Return the lines ``report()`` writes, in batch order."""
        return [format_result(index, result) for index, result in enumerate(self._results)]

    def report(self, stream: Optional[TextIO] = None) -> None:
        """Write one line per result to *stream* (standard output by default)."""
        # sys.stdout is looked up per call
        out = sys.stdout if stream is None else stream
        lines = self.format_lines()
        for line in lines:
            print(line, file=out)
        logger.debug(
            "Reported %d results (%d invalid)", len(lines), len(self.pick_invalid())
        )


__all__ = ["ABSENT_MESSAGE", "StdoutReporter", "format_result"]
