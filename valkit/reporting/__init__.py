"""Reporting package - render batches of validation results."""

from .base import Reporter
from .stdout import StdoutReporter, format_result

__all__ = [
    "Reporter",
    "StdoutReporter",
    "format_result",
]
