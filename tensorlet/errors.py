# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Exceptions raised by tensorlet."""

from __future__ import annotations

from typing import Any


class ShapeMismatchError(ValueError):
    """Raised when element counts or operand shapes disagree.

    ``expected`` and ``actual`` hold the two values that failed to match:
    sizes for construction, shapes for binary operations.
    """

    def __init__(self, message: str, expected: Any = None, actual: Any = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


__all__ = ["ShapeMismatchError"]
