# Copyright (c) 2025 Soumyadip Sarkar.
# All rights reserved.
#
# This source code is licensed under the Apache-style license found in the
# LICENSE file in the root directory of this source tree.

"""Human-readable rendering of tensors."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .tensor import Tensor

EMPTY_MARKER = "(Empty)"


def format_element(value: np.float32) -> str:
    """Shortest round-tripping float32 text, without a trailing ``.0``."""

    return np.format_float_positional(np.float32(value), trim="-")


def format_shape(shape) -> str:
    return ", ".join(str(dim) for dim in shape)


def format_tensor(tensor: "Tensor") -> str:
    """Render ``tensor`` as its size, its shape and then its elements.

    Tensors without elements render as :data:`EMPTY_MARKER`.

    Examples:
        >>> format_tensor(Tensor([1.0, 2.5], (2,)))
        '[Tensor:size=2,shape=2] 1, 2.5'
    """

    data = tensor.data
    if data.size == 0:
        return EMPTY_MARKER

    header = f"[Tensor:size={tensor.size},shape={format_shape(tensor.shape)}]"
    body = ", ".join(format_element(value) for value in data)
    return f"{header} {body}"


__all__ = ["EMPTY_MARKER", "format_element", "format_shape", "format_tensor"]
