# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Base protocol for validation reporters."""

from __future__ import annotations

from typing import Protocol


class Reporter(Protocol):
    """Something that renders a captured batch of validation results."""

    def report(self) -> None:
        ...


__all__ = ["Reporter"]
