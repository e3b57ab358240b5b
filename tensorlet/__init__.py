# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from . import display
from .display import format_tensor
from .errors import ShapeMismatchError
from .tensor import PLACEHOLDER_NAME, Tensor

__version__ = "0.1.0"
__version_tuple__ = (0, 1, 0)

# Tensor factories map directly to the Tensor static constructors.
tensor = Tensor
ones = Tensor.ones
full = Tensor.full
empty = Tensor.empty
full_like = Tensor.full_like
from_numpy = Tensor.from_numpy

__all__ = [
    "Tensor",
    "ShapeMismatchError",
    "PLACEHOLDER_NAME",
    "tensor",
    "ones",
    "full",
    "empty",
    "full_like",
    "from_numpy",
    "display",
    "format_tensor",
]
